"""Abstract interface for quotation storage."""

from abc import ABC, abstractmethod

from cotacao.core.entities.quotation import ListStatus, QuotationList, ResponseLink


class IQuotationStore(ABC):
    """
    Interface for quotation list and response link persistence.

    Every method may raise ``StorageUnavailableError`` when the backend
    fails; a failed call leaves stored data unchanged.
    """

    @abstractmethod
    async def create_list(self, quotation_list: QuotationList) -> QuotationList:
        """Persist a new quotation list."""
        pass

    @abstractmethod
    async def get_list(self, list_id: str) -> QuotationList:
        """Load a list by ID. Raises QuotationListNotFoundError."""
        pass

    @abstractmethod
    async def save_list(self, quotation_list: QuotationList) -> QuotationList:
        """
        Save a loaded list, checking ``version`` against the stored row.

        Raises ConcurrentModificationError when the stored version differs.
        Returns the list with its new version.
        """
        pass

    @abstractmethod
    async def list_lists(
        self,
        status: ListStatus | None = None,
        limit: int = 100,
        offset: int = 0,
    ) -> list[QuotationList]:
        """
        List quotation lists, newest first, optionally filtered by status.

        A negative ``limit`` returns every matching list.
        """
        pass

    @abstractmethod
    async def list_ids_with_links(self) -> set[str]:
        """IDs of every list that has at least one issued link."""
        pass

    @abstractmethod
    async def save_link(self, link: ResponseLink) -> ResponseLink:
        """Insert or update a response link."""
        pass

    @abstractmethod
    async def get_link_by_token(self, token: str) -> ResponseLink | None:
        """Get a link by exact token match."""
        pass

    @abstractmethod
    async def list_links(self, list_id: str) -> list[ResponseLink]:
        """Links issued for a list, oldest first."""
        pass

    @abstractmethod
    async def record_submission(
        self,
        link: ResponseLink,
        entries: dict[str, str],
    ) -> tuple[QuotationList, ResponseLink]:
        """
        Atomically merge a supplier response and consume its link.

        Within one write transaction against the current stored state:
        the link must still be pending (else LinkAlreadyRespondedError),
        the list must still be open (else ListFinalizedError),
        ``responses[link.supplier_name]`` is replaced by ``entries`` and the
        link is marked responded. Returns the updated list and link.
        """
        pass
