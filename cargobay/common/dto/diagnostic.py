from typing import Optional, List, Dict, Any

from pydantic import Field

from cargobay.common.dto.base import ToolchainRecord
from cargobay.common.dto.artifact import Target


class DiagnosticCode(ToolchainRecord):
    code: str
    explanation: Optional[str] = None


class Diagnostic(ToolchainRecord):
    message: str
    level: str
    code: Optional[DiagnosticCode] = None
    spans: List[Dict[str, Any]] = Field(default_factory=list)
    children: List["Diagnostic"] = Field(default_factory=list)
    rendered: Optional[str] = None

    def __str__(self) -> str:
        return self.rendered or self.message


class CompilerMessage(ToolchainRecord):
    package_id: str
    target: Optional[Target] = None
    message: Diagnostic


Diagnostic.model_rebuild()
