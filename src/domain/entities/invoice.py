"""
Invoice and Payment Entities
"""

from datetime import datetime
from decimal import Decimal
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from src.domain.base import utcnow

from .enums import InvoiceStatus, PaymentStatus


class Invoice(SQLModel, table=True):
    """Invoice issued for a paid subscription period"""

    __tablename__ = "invoices"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    subscription_id: UUID = Field(foreign_key="subscriptions.id", nullable=False, index=True)
    total_amount: Decimal = Field(default=Decimal("0"), max_digits=10, decimal_places=2)
    status: InvoiceStatus = Field(default=InvoiceStatus.paid)

    issued_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))


class Payment(SQLModel, table=True):
    """Payment settling an invoice"""

    __tablename__ = "payments"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    invoice_id: UUID = Field(foreign_key="invoices.id", nullable=False, index=True)
    amount: Decimal = Field(default=Decimal("0"), max_digits=10, decimal_places=2)
    status: PaymentStatus = Field(default=PaymentStatus.completed)
    method: str = Field(default="Credit Card", max_length=50)

    paid_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
