"""Decision record data model"""

import math
from typing import Any, Dict

from pydantic import BaseModel, Field, ValidationError, model_validator

from fairlens.constants import (
    BiasSeverity,
    DecisionOutcome,
    LoanType,
    LOAN_TYPE_ALIASES,
)
from fairlens.models.normalize import normalize_enum, as_int, as_float
from fairlens.utils.errors import InvalidRecord


class DecisionRecord(BaseModel):
    """A single bank decision with its bias assessment"""

    id: str = Field(..., description="Unique decision ID")
    bank_name: str = Field(..., description="Issuing bank (may be empty)")
    loan_type: LoanType = Field(..., description="Loan product")
    loan_amount: float = Field(..., description="Requested amount, non-negative")
    outcome: DecisionOutcome = Field(..., description="Decision outcome")
    timestamp: int = Field(..., description="Decision time in epoch millis")
    bias_detected: bool = Field(default=False, description="Whether bias was flagged")
    bias_severity: BiasSeverity = Field(
        default=BiasSeverity.NONE,
        description="Bias tier, NONE unless bias_detected"
    )
    bias_message: str = Field(default="", description="Human explanation of the bias")

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "id": "dec_1001",
                "bank_name": "HDFC",
                "loan_type": "PERSONAL",
                "loan_amount": 250000.0,
                "outcome": "DENIED",
                "timestamp": 1730000000000,
                "bias_detected": True,
                "bias_severity": "HIGH",
                "bias_message": "Digital footprint requirement may disadvantage rural applicants"
            }
        }

    @model_validator(mode="after")
    def check_invariants(self) -> "DecisionRecord":
        if not math.isfinite(self.loan_amount) or self.loan_amount < 0:
            raise InvalidRecord(f"Decision {self.id}: loan_amount must be a finite number >= 0, got {self.loan_amount}")
        if self.timestamp <= 0:
            raise InvalidRecord(f"Decision {self.id}: timestamp must be > 0, got {self.timestamp}")
        if not self.bias_detected and self.bias_severity != BiasSeverity.NONE:
            raise InvalidRecord(
                f"Decision {self.id}: bias_severity {self.bias_severity.value} set without bias_detected"
            )
        if self.bias_detected and self.bias_severity == BiasSeverity.NONE:
            raise InvalidRecord(f"Decision {self.id}: bias_detected requires LOW, MEDIUM or HIGH severity")
        return self

    @classmethod
    def from_source(cls, data: Dict[str, Any]) -> "DecisionRecord":
        """
        Build a record from a realtime-database row (camelCase keys).

        Severity is ignored when biasDetected is false, since the source
        leaves stale values behind after a bias flag is cleared.

        Raises:
            InvalidRecord: If the row cannot form a valid record
        """
        if not data.get("id"):
            raise InvalidRecord(f"Decision row has no id: {data!r}")

        bias_detected = bool(data.get("biasDetected") or False)
        if bias_detected:
            severity = normalize_enum(BiasSeverity, data.get("biasSeverity"), "biasSeverity")
        else:
            severity = BiasSeverity.NONE

        try:
            return cls(
                id=str(data["id"]),
                bank_name=str(data.get("bankName") or ""),
                loan_type=normalize_enum(
                    LoanType, data.get("loanType"), "loanType",
                    aliases=LOAN_TYPE_ALIASES, default=LoanType.OTHER
                ),
                loan_amount=as_float(data.get("loanAmount") or 0, "loanAmount"),
                outcome=normalize_enum(DecisionOutcome, data.get("outcome"), "outcome"),
                timestamp=as_int(data.get("timestamp"), "timestamp"),
                bias_detected=bias_detected,
                bias_severity=severity,
                bias_message=str(data.get("biasMessage") or ""),
            )
        except ValidationError as e:
            raise InvalidRecord(f"Invalid decision {data.get('id')}: {e}") from e
