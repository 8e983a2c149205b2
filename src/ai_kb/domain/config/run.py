"""Run options configuration model."""

from typing import Literal

from pydantic import BaseModel


class RunOptions(BaseModel):
    """Options selecting what a run does.

    Attributes:
        verbose: Whether to log debug details
        mode: "generate" builds one document per section, "tree" renders the project tree
    """

    verbose: bool = False
    mode: Literal["generate", "tree"] = "generate"
