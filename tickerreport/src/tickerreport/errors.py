import json
import traceback

class TickerReportError(Exception):
    """Base exception for tickerreport"""
    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

class ValidationError(TickerReportError):
    """Input or series validation errors"""
    pass

class ProviderError(TickerReportError):
    """Market data provider errors (network, unknown symbol)"""
    pass

class MissingDataError(TickerReportError):
    """A required field was absent in provider data"""
    pass

class CalculationError(TickerReportError):
    """Undefined metric, e.g. division by a zero close"""
    pass

class UnknownError(TickerReportError):
    """Unexpected errors"""
    pass

def format_error(e: Exception) -> str:
    """Format exception as a JSON error envelope."""

    if isinstance(e, TickerReportError):
        error_type = e.__class__.__name__
        message = e.message
        details = e.details
    else:
        error_type = "UnknownError"
        message = str(e)
        details = {
            "traceback": traceback.format_exc().splitlines()
        }

    payload = {
        "ok": False,
        "error": {
            "type": error_type,
            "message": message,
            "details": details
        },
        "meta": {
            "version": 1
        }
    }

    return json.dumps(payload, indent=2, default=str)
