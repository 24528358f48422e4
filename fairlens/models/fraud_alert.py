"""Fraud alert data model"""

import math
from typing import Any, Dict, FrozenSet

from pydantic import BaseModel, Field, ValidationError, model_validator

from fairlens.constants import (
    AlertStatus,
    FraudFlag,
    RiskLevel,
    TransactionType,
    ALLOWED_STATUS_TRANSITIONS,
    FRAUD_FLAG_FIELDS,
)
from fairlens.models.normalize import normalize_enum, as_int, as_float
from fairlens.utils.errors import InvalidRecord, InvalidStatusTransition


class FraudAlert(BaseModel):
    """Fraud alert raised on a customer transaction"""

    id: str = Field(..., description="Unique alert ID")
    customer_id: str = Field(..., description="Owning customer")
    risk_level: RiskLevel = Field(..., description="Alert risk level")
    status: AlertStatus = Field(default=AlertStatus.FLAGGED, description="Review status")
    amount: float = Field(..., description="Transaction amount, non-negative")
    transaction_type: TransactionType = Field(..., description="Transaction kind")
    timestamp: int = Field(..., description="Alert time in epoch millis")
    flags: FrozenSet[FraudFlag] = Field(default_factory=frozenset, description="Contributing signals")
    merchant_name: str = Field(default="", description="Merchant, if known")
    location: str = Field(default="", description="Transaction location, if known")
    risk_score: float = Field(default=0.0, ge=0, le=100, description="Model risk score (0-100)")

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "id": "fa_2001",
                "customer_id": "CUST_001",
                "risk_level": "CRITICAL",
                "status": "FLAGGED",
                "amount": 89000.0,
                "transaction_type": "TRANSFER",
                "timestamp": 1730000500000,
                "flags": ["UNUSUAL_AMOUNT", "NEW_MERCHANT"],
                "merchant_name": "QuickPay Wallet",
                "location": "Mumbai",
                "risk_score": 92
            }
        }

    @model_validator(mode="after")
    def check_invariants(self) -> "FraudAlert":
        if not self.customer_id:
            raise InvalidRecord(f"Alert {self.id}: customer_id is required")
        if not math.isfinite(self.amount) or self.amount < 0:
            raise InvalidRecord(f"Alert {self.id}: amount must be a finite number >= 0, got {self.amount}")
        if self.timestamp <= 0:
            raise InvalidRecord(f"Alert {self.id}: timestamp must be > 0, got {self.timestamp}")
        return self

    @property
    def is_terminal(self) -> bool:
        """BLOCKED and APPROVED alerts accept no further status changes"""
        return not ALLOWED_STATUS_TRANSITIONS[self.status]

    @classmethod
    def from_source(cls, data: Dict[str, Any]) -> "FraudAlert":
        """
        Build an alert from a realtime-database row (camelCase keys).

        Flags come either as a "flags" list or as the per-signal boolean
        columns (unusualAmount, newMerchant, ...).

        Raises:
            InvalidRecord: If the row cannot form a valid alert
        """
        if not data.get("id"):
            raise InvalidRecord(f"Alert row has no id: {data!r}")

        flags = set()
        for name in data.get("flags") or []:
            flags.add(normalize_enum(FraudFlag, name, "flags"))
        for column, flag in FRAUD_FLAG_FIELDS.items():
            if data.get(column):
                flags.add(flag)

        try:
            return cls(
                id=str(data["id"]),
                customer_id=str(data.get("customerId") or ""),
                risk_level=normalize_enum(RiskLevel, data.get("riskLevel"), "riskLevel"),
                status=normalize_enum(
                    AlertStatus, data.get("status"), "status", default=AlertStatus.FLAGGED
                ),
                amount=as_float(data.get("amount") or 0, "amount"),
                transaction_type=normalize_enum(
                    TransactionType, data.get("transactionType"), "transactionType",
                    default=TransactionType.OTHER
                ),
                timestamp=as_int(data.get("timestamp"), "timestamp"),
                flags=frozenset(flags),
                merchant_name=str(data.get("merchantName") or ""),
                location=str(data.get("location") or ""),
                risk_score=as_float(data.get("riskScore") or 0, "riskScore"),
            )
        except ValidationError as e:
            raise InvalidRecord(f"Invalid fraud alert {data.get('id')}: {e}") from e


def check_transition(current: AlertStatus, target: AlertStatus) -> None:
    """
    Validate a status change.

    Raises:
        InvalidStatusTransition: If target is not reachable from current
    """
    if target not in ALLOWED_STATUS_TRANSITIONS[current]:
        raise InvalidStatusTransition(
            f"Cannot move alert from {current.value} to {target.value}"
        )
