"""Constants and enums for the fairness core"""

from enum import Enum


class LoanType(str, Enum):
    """Loan product of a bank decision"""
    PERSONAL = "PERSONAL"
    HOME = "HOME"
    CAR = "CAR"
    EDUCATION = "EDUCATION"
    BUSINESS = "BUSINESS"
    CREDIT_CARD = "CREDIT_CARD"
    OTHER = "OTHER"


class DecisionOutcome(str, Enum):
    """Bank decision outcome"""
    APPROVED = "APPROVED"
    DENIED = "DENIED"
    PENDING = "PENDING"


class BiasSeverity(str, Enum):
    """Severity tier of a detected decision bias"""
    NONE = "NONE"
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


class RiskLevel(str, Enum):
    """Fraud alert risk level, LOW < MEDIUM < HIGH < CRITICAL"""
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    CRITICAL = "CRITICAL"


class AlertStatus(str, Enum):
    """Fraud alert review status"""
    FLAGGED = "FLAGGED"
    BLOCKED = "BLOCKED"
    APPROVED = "APPROVED"


class TransactionType(str, Enum):
    """Transaction kind behind a fraud alert"""
    TRANSFER = "TRANSFER"
    PAYMENT = "PAYMENT"
    WITHDRAWAL = "WITHDRAWAL"
    PURCHASE = "PURCHASE"
    OTHER = "OTHER"


class FraudFlag(str, Enum):
    """Signals that contributed to a fraud alert"""
    UNUSUAL_AMOUNT = "UNUSUAL_AMOUNT"
    UNUSUAL_LOCATION = "UNUSUAL_LOCATION"
    UNUSUAL_TIME = "UNUSUAL_TIME"
    NEW_MERCHANT = "NEW_MERCHANT"
    MULTIPLE_ATTEMPTS = "MULTIPLE_ATTEMPTS"
    DEVICE_MISMATCH = "DEVICE_MISMATCH"


class FairnessLabel(str, Enum):
    """Fairness score band"""
    EXCELLENT = "EXCELLENT"
    GOOD = "GOOD"
    NEEDS_ATTENTION = "NEEDS_ATTENTION"
    CRITICAL = "CRITICAL"


class RiskFilter(str, Enum):
    """Risk-level filter options for the alert list"""
    ALL = "ALL"
    CRITICAL = "CRITICAL"
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"


# Ordering used for sorting and thresholds
SEVERITY_RANK = {
    BiasSeverity.NONE: 0,
    BiasSeverity.LOW: 1,
    BiasSeverity.MEDIUM: 2,
    BiasSeverity.HIGH: 3,
}

RISK_RANK = {
    RiskLevel.LOW: 0,
    RiskLevel.MEDIUM: 1,
    RiskLevel.HIGH: 2,
    RiskLevel.CRITICAL: 3,
}

HIGH_RISK_LEVELS = frozenset({RiskLevel.HIGH, RiskLevel.CRITICAL})

# Fairness label thresholds, checked top to bottom
FAIRNESS_LABEL_THRESHOLDS = [
    (90, FairnessLabel.EXCELLENT),
    (70, FairnessLabel.GOOD),
    (50, FairnessLabel.NEEDS_ATTENTION),
]
FAIRNESS_FLOOR_LABEL = FairnessLabel.CRITICAL

MAX_FAIRNESS_SCORE = 100
MIN_FAIRNESS_SCORE = 0

# FLAGGED is the only non-terminal status
ALLOWED_STATUS_TRANSITIONS = {
    AlertStatus.FLAGGED: frozenset({AlertStatus.BLOCKED, AlertStatus.APPROVED}),
    AlertStatus.BLOCKED: frozenset(),
    AlertStatus.APPROVED: frozenset(),
}

LOAN_TYPE_DISPLAY_NAMES = {
    LoanType.PERSONAL: "Personal Loan",
    LoanType.HOME: "Home Loan",
    LoanType.CAR: "Car Loan",
    LoanType.EDUCATION: "Education Loan",
    LoanType.BUSINESS: "Business Loan",
    LoanType.CREDIT_CARD: "Credit Card",
    LoanType.OTHER: "Other",
}

# Source spellings seen in the realtime database
LOAN_TYPE_ALIASES = {
    "PERSONAL_LOAN": LoanType.PERSONAL,
    "HOME_LOAN": LoanType.HOME,
    "CAR_LOAN": LoanType.CAR,
    "AUTO_LOAN": LoanType.CAR,
    "EDUCATION_LOAN": LoanType.EDUCATION,
    "BUSINESS_LOAN": LoanType.BUSINESS,
}

# Boolean alert columns -> flag
FRAUD_FLAG_FIELDS = {
    "unusualAmount": FraudFlag.UNUSUAL_AMOUNT,
    "unusualLocation": FraudFlag.UNUSUAL_LOCATION,
    "unusualTime": FraudFlag.UNUSUAL_TIME,
    "newMerchant": FraudFlag.NEW_MERCHANT,
    "multipleAttempts": FraudFlag.MULTIPLE_ATTEMPTS,
    "deviceMismatch": FraudFlag.DEVICE_MISMATCH,
}

# Data source defaults
DEFAULT_CACHE_TTL_SECONDS = 30
DEFAULT_FETCH_RETRIES = 3
