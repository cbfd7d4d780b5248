from abc import ABC, abstractmethod
from typing import List
from uuid import UUID

from src.domain.entities import Invoice, Payment


class IInvoiceRepository(ABC):
    """Invoice repository interface - application layer"""

    @abstractmethod
    async def create(self, invoice: Invoice) -> Invoice:
        """Create a new invoice"""
        pass

    @abstractmethod
    async def list_by_organization(self, organization_id: UUID) -> List[Invoice]:
        """List invoices of every subscription of an organization, newest first"""
        pass


class IPaymentRepository(ABC):
    """Payment repository interface - application layer"""

    @abstractmethod
    async def create(self, payment: Payment) -> Payment:
        """Create a new payment"""
        pass

    @abstractmethod
    async def list_by_invoice_ids(self, invoice_ids: List[UUID]) -> List[Payment]:
        """List payments settling the given invoices"""
        pass
