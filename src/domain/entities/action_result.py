"""
Результат операции админ-панели в формате {success, error}.
"""
from dataclasses import dataclass
from typing import Optional


@dataclass
class ActionResult:
    success: bool
    error: Optional[str] = None

    @classmethod
    def ok(cls) -> "ActionResult":
        return cls(success=True)

    @classmethod
    def fail(cls, error: str) -> "ActionResult":
        return cls(success=False, error=error)

    def to_dict(self) -> dict:
        if self.success:
            return {"success": True}
        return {"success": False, "error": self.error}
