"""Business-rule errors raised by the storefront core.

Every error carries a ``messages`` dict (field name to list of messages), a
``kind`` that the request layer maps to a transport status, and a machine
``code`` naming the specific rule that failed.
"""


class StorefrontError(Exception):
    kind = "error"
    code = "error"

    def __init__(self, messages, code=None):
        if isinstance(messages, str):
            messages = {"_entity": [messages]}
        self.messages = messages
        if code is not None:
            self.code = code
        super().__init__(self.message)

    @property
    def message(self) -> str:
        """First message, flattened for envelopes and log lines."""
        for field_messages in self.messages.values():
            if field_messages:
                return field_messages[0]
        return self.code

    def __repr__(self):
        return f"{type(self).__name__}({self.messages!r}, code={self.code!r})"


class ValidationError(StorefrontError):
    """A required field is missing or a value is out of range."""

    kind = "validation"
    code = "invalid_input"


class NotFoundError(StorefrontError):
    """A referenced record does not exist."""

    kind = "not_found"
    code = "not_found"


class StateError(StorefrontError):
    """The operation is not allowed in the current state."""

    kind = "state"
    code = "invalid_state"


class DiscountError(StorefrontError):
    """The discount code is unknown or already used."""

    kind = "discount"
    code = "invalid_discount_code"
