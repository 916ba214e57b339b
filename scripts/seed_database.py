"""Database seeding script (demo users and a demo bill)"""
import asyncio
import logging
import sys
from decimal import Decimal
from pathlib import Path

# Add parent directory to path to import splitbill modules
sys.path.append(str(Path(__file__).parent.parent))

from splitbill.config import get_settings
from splitbill.core.logging_config import configure_logging
from splitbill.core.security import hash_password
from splitbill.database import Database
from splitbill.models.bill import Bill
from splitbill.models.item import Item, ItemSplit
from splitbill.models.participant import Participant
from splitbill.models.user import User
from splitbill.repositories.user_repository import UserRepository

logger = logging.getLogger("seed_database")

DEMO_PASSWORD = "password123"

USERS = [
    {"email": "user1@example.com", "username": "user1", "full_name": "User One"},
    {"email": "user2@example.com", "username": "user2", "full_name": "User Two"},
    {"email": "user3@example.com", "username": "user3", "full_name": "User Three"},
]


async def seed_users(session) -> list:
    """Create the demo users that don't exist yet"""
    users = []
    for user_data in USERS:
        existing_user = await UserRepository.get_by_email(session, user_data["email"])
        if existing_user:
            logger.info("User '%s' already exists, skipping", user_data["username"])
            users.append(existing_user)
            continue

        user = User(
            hashed_password=hash_password(DEMO_PASSWORD),
            is_active=True,
            **user_data,
        )
        session.add(user)
        users.append(user)
        logger.info("Created user '%s' (%s)", user_data["username"], user_data["email"])

    await session.flush()
    return users


async def seed_demo_bill(session, owner: User) -> Bill:
    """
    Create a bill with three diners, shared and weighted items, and
    discount, tip and tax set.
    """
    bill = Bill(
        owner_id=owner.id,
        title="Friday dinner",
        discount_amount=Decimal("5.00"),
        tip_percent=Decimal("10"),
        tax_percent=Decimal("11"),
    )
    session.add(bill)
    await session.flush()

    diners = [Participant(bill_id=bill.id, name=name) for name in ("Ana", "Budi", "Citra")]
    session.add_all(diners)
    await session.flush()

    pizza = Item(bill_id=bill.id, name="Pizza", price=Decimal("24.00"), quantity=2)
    wine = Item(bill_id=bill.id, name="Wine", price=Decimal("30.00"), quantity=1)
    session.add_all([pizza, wine])
    await session.flush()

    # Ana drinks twice as much as Budi; Citra doesn't drink
    session.add_all([
        ItemSplit(item_id=wine.id, participant_id=diners[0].id, weight=Decimal("2")),
        ItemSplit(item_id=wine.id, participant_id=diners[1].id, weight=Decimal("1")),
    ])
    await session.flush()

    logger.info("Created demo bill '%s' for %s", bill.title, owner.username)
    return bill


async def main():
    """Main function to run seeding"""
    settings = get_settings()
    configure_logging(settings.log_level)

    database = Database.from_settings(settings)
    await database.create_all()

    try:
        async with database.session_factory() as session:
            users = await seed_users(session)
            await seed_demo_bill(session, users[0])
            await session.commit()

        logger.info("Seeding completed; all demo users have password '%s'", DEMO_PASSWORD)
    finally:
        await database.dispose()


if __name__ == "__main__":
    asyncio.run(main())
