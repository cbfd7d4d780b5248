from typing import List
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.invoice_repository import IInvoiceRepository, IPaymentRepository
from src.domain.entities import Invoice, Payment, Subscription


class InvoiceRepository(IInvoiceRepository):
    """Invoice repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, invoice: Invoice) -> Invoice:
        """Create a new invoice"""
        self.session.add(invoice)
        await self.session.flush()
        await self.session.refresh(invoice)
        return invoice

    async def list_by_organization(self, organization_id: UUID) -> List[Invoice]:
        """List invoices of every subscription of an organization, newest first"""
        stmt = (
            select(Invoice)
            .join(Subscription, Invoice.subscription_id == Subscription.id)
            .where(Subscription.organization_id == organization_id)
            .order_by(Invoice.issued_at.desc())
        )
        result = await self.session.exec(stmt)
        return list(result.all())


class PaymentRepository(IPaymentRepository):
    """Payment repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, payment: Payment) -> Payment:
        """Create a new payment"""
        self.session.add(payment)
        await self.session.flush()
        await self.session.refresh(payment)
        return payment

    async def list_by_invoice_ids(self, invoice_ids: List[UUID]) -> List[Payment]:
        """List payments settling the given invoices"""
        if not invoice_ids:
            return []
        stmt = select(Payment).where(Payment.invoice_id.in_(invoice_ids))
        result = await self.session.exec(stmt)
        return list(result.all())
