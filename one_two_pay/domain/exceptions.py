"""Domain-specific exceptions"""

from one_two_pay.domain.status import ApiError


class PayoutError(Exception):
    """Base exception for the payout client"""

    pass


class ValidationError(PayoutError):
    """Caller-supplied input violates a precondition; raised before any request is sent"""

    pass


class Ref1LengthError(ValidationError):
    """ref1 must be between 1 and 30 characters long"""

    def __init__(self, ref1: str, min_length: int, max_length: int):
        super().__init__(
            f"ref1 must have length >= {min_length} and <= {max_length}, got {len(ref1)}"
        )
        self.ref1 = ref1


class AmountNotFiniteError(ValidationError):
    """Transfer amount is NaN or infinite and cannot be sent as a JSON number"""

    def __init__(self, amount):
        super().__init__(f"amount must be a finite number, got {amount}")
        self.amount = amount


class UnknownBankAcronymError(ValidationError):
    """No supported bank carries this acronym"""

    def __init__(self, acronym: str):
        super().__init__(f"We don't know bank with acronym: {acronym}")
        self.acronym = acronym


class GatewayError(PayoutError):
    """Gateway processed the call but answered with a non-success status code"""

    def __init__(self, api_error: ApiError, message: str = ""):
        super().__init__(f"API returned failed code {api_error.code}: {api_error}")
        self.api_error = api_error
        self.message = message

    @property
    def code(self) -> int:
        return self.api_error.code


class MalformedResponseError(PayoutError):
    """Response breaks the gateway contract and cannot be turned into a result"""

    pass


class InvalidPayloadError(MalformedResponseError):
    """Response body does not have the shape of the expected wire document"""

    pass


class MissingFieldError(MalformedResponseError):
    """A field required on success is absent"""

    def __init__(self, field: str):
        super().__init__(f"Success body missing field: {field}")
        self.field = field


class TimestampParseError(MalformedResponseError):
    def __init__(self, text: str, reason: str):
        super().__init__(f"Cannot parse timestamp: {text}. Error: {reason}")
        self.text = text
        self.reason = reason


class InvalidStatusError(MalformedResponseError):
    def __init__(self, text: str):
        super().__init__(f"Status is not integer: {text}")
        self.text = text


class InvalidBankCodeError(MalformedResponseError):
    def __init__(self, text: str):
        super().__init__(f"Bank code is not integer: {text}")
        self.text = text


class UnknownBankError(MalformedResponseError):
    """Bank code does not resolve to a supported bank"""

    def __init__(self, code: int):
        super().__init__(f"We don't know bank with code: {code}")
        self.code = code


class InvalidAmountError(MalformedResponseError):
    def __init__(self, text: str):
        super().__init__(f"Amount THB is not in decimal format: {text}")
        self.text = text


class TransportError(PayoutError):
    """Gateway is unreachable, timed out, or answered with something that is not JSON"""

    pass
