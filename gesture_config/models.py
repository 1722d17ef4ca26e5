"""
Pydantic data models for gesture configuration.

Defines the generic XML node tree, the gesture records produced from it,
and the result of a load/reload pass.
"""

from typing import Dict, Iterator, List, Optional

from pydantic import BaseModel, Field

from .errors import ErrorCode


class XmlNode(BaseModel):
    """Generic attributed document node, independent of gesture semantics."""

    tag: str = Field(..., description="Element tag name")
    attributes: Dict[str, str] = Field(default_factory=dict, description="Element attributes")
    children: List["XmlNode"] = Field(default_factory=list, description="Child elements in document order")
    text: Optional[str] = Field(None, description="Direct text content")

    def attribute(self, name: str) -> str:
        """Return attribute value, or an empty string when it is missing."""
        return self.attributes.get(name, "")

    def children_named(self, tag: str) -> Iterator["XmlNode"]:
        return (child for child in self.children if child.tag == tag)

    def first_child(self, tag: str) -> Optional["XmlNode"]:
        return next(self.children_named(tag), None)


class GestureConfigRecord(BaseModel):
    """One resolved (application, gesture, action, settings) tuple."""

    application: str = Field(..., description="Single application identifier")
    gesture_type: str = Field("", description="Gesture type (swipe, pinch, tap...)")
    fingers: str = Field("", description="Number of fingers, unparsed")
    direction: str = Field("", description="Gesture direction, may be empty")
    action_type: str = Field("", description="Action type")
    settings: Dict[str, str] = Field(default_factory=dict, description="Action settings")


class ReloadResult(BaseModel):
    """Outcome of a parse+map pass over the configuration file."""

    success: bool
    record_count: int = Field(0, description="Records mapped from the document, before any store de-duplication")
    error_code: Optional[ErrorCode] = None
    message: Optional[str] = None
    duration_ms: int = 0


XmlNode.model_rebuild()
