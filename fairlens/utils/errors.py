"""Custom exceptions for the fairness core"""


class FairLensError(Exception):
    """Base exception for fairness core errors"""
    pass


class InvalidRecord(FairLensError):
    """A decision or fraud alert violates a data-model invariant"""
    pass


class DataUnavailable(FairLensError):
    """Decision/alert data source could not be reached or read"""
    pass


class InvalidStatusTransition(FairLensError):
    """Fraud alert status change that is not allowed"""
    pass


class ConfigurationError(FairLensError):
    """Configuration loading errors"""
    pass
