from typing import ClassVar, Tuple
from pydantic import BaseModel


class Record(BaseModel):
    """Flat attribute bag identified by a string id"""
    id: str

    # Attributes matched by the list page search box
    search_fields: ClassVar[Tuple[str, ...]] = ()

    def search_text(self) -> str:
        return " ".join(str(getattr(self, name) or "") for name in self.search_fields)

    def matches(self, term: str) -> bool:
        """Case-insensitive substring match against the search fields"""
        if not term:
            return True
        return term.lower() in self.search_text().lower()
