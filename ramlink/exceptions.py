"""Ramlink exceptions."""


class BaseError(Exception):
    """
    Exception carrying a stable machine-readable code.

    Subclasses declare ``_default_messages`` keyed by code; an explicit
    ``message`` overrides the default. Extra keyword arguments are kept in
    ``context`` for logging and API payloads.
    """

    _default_messages: dict[str, str] = {}

    def __init__(self, code: str, message: str | None = None, **context):
        self.code = code
        self.message = message or self._default_messages.get(code, code)
        self.context = context
        super().__init__(f"[{code}] {self.message}")

    def as_dict(self) -> dict:
        return {"code": self.code, "message": self.message, **self.context}


class RamlinkError(BaseError):
    """
    Structured exception for partner API operations.

    Usage:
        try:
            count = CartService.add_item(customer, product_id, context=ctx)
        except RamlinkError as e:
            if e.code == "PRODUCT_UNAVAILABLE":
                handle_inactive()
    """

    _default_messages = {
        "UNAUTHORIZED": "Invalid or missing service token",
        "VALIDATION_FAILED": "Invalid request data",
        "CUSTOMER_UNRESOLVABLE": "No se pudo resolver el cliente",
        "PRODUCT_NOT_FOUND": "Producto no encontrado",
        "PRODUCT_UNAVAILABLE": "Producto no disponible",
        "CART_OPERATION_FAILED": "No se pudo agregar el producto al carrito",
    }

    HTTP_STATUS = {
        "UNAUTHORIZED": 401,
    }

    @property
    def status_code(self) -> int:
        return self.HTTP_STATUS.get(self.code, 400)
