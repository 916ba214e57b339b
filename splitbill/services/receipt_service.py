"""Plain-text receipts"""
from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from splitbill.models.bill import Bill
from splitbill.services.allocation import AllocationResult, BillSnapshot
from splitbill.services.bill_service import BillService
from splitbill.services.summary_service import SummaryService

LINE_WIDTH = 40


def _row(label: str, value: Decimal) -> str:
    amount = str(value)
    label_width = max(LINE_WIDTH - len(amount) - 1, 0)
    return f"{label[:label_width]:<{label_width}} {amount}"


class ReceiptService:
    """Renders an allocated bill for download"""

    @staticmethod
    def render_text(
        bill: Bill,
        snapshot: BillSnapshot,
        result: AllocationResult,
        generated_at: Optional[datetime] = None,
    ) -> str:
        """
        Render a receipt.

        Discount, tip and tax lines are left out when they are zero.

        Args:
            bill: Bill being rendered
            snapshot: Snapshot the result was computed from
            result: Rounded allocation
            generated_at: Timestamp printed at the bottom (default: now, UTC)

        Returns:
            Receipt text ending in a newline
        """
        generated_at = generated_at or datetime.utcnow()
        divider = "-" * LINE_WIDTH

        lines: List[str] = [bill.title.center(LINE_WIDTH).rstrip(), divider]

        for item in snapshot.items:
            label = item.name if item.quantity == 1 else f"{item.name} x{item.quantity}"
            lines.append(_row(label, item.line_total))

        lines.append(divider)
        lines.append(_row("Subtotal", result.subtotal))
        for label, value in (
            ("Discount", result.discount),
            ("Tip", result.tip),
            ("Tax", result.tax),
        ):
            if value > 0:
                lines.append(_row(label, value))
        lines.append(divider)
        lines.append(_row("TOTAL", result.total))
        lines.append(divider)

        for participant in snapshot.participants:
            amount = result.per_participant_total.get(participant.id, Decimal("0"))
            lines.append(_row(participant.name, amount))

        lines.append("")
        lines.append(f"Generated {generated_at:%Y-%m-%d %H:%M} UTC")
        return "\n".join(lines) + "\n"

    @staticmethod
    async def build_receipt(bill_id: UUID, user_id: UUID, db: AsyncSession) -> str:
        """
        Load, allocate and render one of the user's bills.

        Raises:
            NotFoundError: If bill not found
            AuthorizationError: If user is not the owner
        """
        bill = await BillService.get_owned_bill(bill_id, user_id, db)
        snapshot = await SummaryService.load_snapshot(db, bill)
        result = SummaryService.allocate_rounded(snapshot)
        return ReceiptService.render_text(bill, snapshot, result)
