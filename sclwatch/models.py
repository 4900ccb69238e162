from pydantic import BaseModel, Field
from typing import Optional, List, Dict

from .scl import SCLResult

class SCLReport(BaseModel):
    score: int = Field(..., ge=-1, le=9)
    description: str
    headerSource: str
    rawHeader: str

    @classmethod
    def from_result(cls, result: SCLResult) -> "SCLReport":
        return cls(
            score=result.score,
            description=result.description,
            headerSource=result.header_source,
            rawHeader=result.raw_header,
        )

class ExtractionResult(BaseModel):
    found: bool
    scl: Optional[SCLReport] = None
    processingMs: int

class JsonHeadersInput(BaseModel):
    headers: Dict[str, List[str]] = Field(..., description="Cabeceras del mensaje: nombre exacto -> lista de valores")
