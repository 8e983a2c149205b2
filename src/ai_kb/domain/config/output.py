"""Output configuration model."""

from pydantic import BaseModel, Field


class OutputConfig(BaseModel):
    """Configuration for generated documents.

    Attributes:
        directory: Directory the documents are written to
        prefix: Filename prefix for every document
        tree_name: Name used for the project tree document
    """

    directory: str = "."
    prefix: str = Field("ai-kb-", min_length=1)
    tree_name: str = Field("tree", min_length=1)

    def filename_for(self, name: str) -> str:
        return f"{self.prefix}{name}.md"
