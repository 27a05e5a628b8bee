"""
Search Coordinator implementation for the document store
"""
import logging
from typing import Iterable, List, Sequence
from document_store.core.models import Document, SearchRequest
from .criteria import CRITERIA, Criterion


class SearchCoordinator:
    """
    Evaluates a search request against documents by OR-ing the criteria handlers
    """

    def __init__(self, criteria: Sequence[Criterion] = CRITERIA):
        self.criteria = tuple(criteria)
        self.logger = logging.getLogger("SearchCoordinator")

    def matches(self, document: Document, request: SearchRequest) -> bool:
        """
        Check if a document satisfies at least one criterion

        Args:
            document: Stored document to test
            request: Search criteria

        Returns:
            True on the first matching criterion, False if none match
        """
        for criterion in self.criteria:
            if criterion(document, request):
                return True
        return False

    def search(self, documents: Iterable[Document], request: SearchRequest) -> List[Document]:
        """
        Filter documents by the request

        Args:
            documents: Documents to scan
            request: Search criteria

        Returns:
            Matching documents in scan order
        """
        results = [document for document in documents if self.matches(document, request)]
        self.logger.debug(f"Search matched {len(results)} documents")
        return results
