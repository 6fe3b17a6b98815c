"""Message contract binding request models to their response type, path and verb.

A request declares its response type as the generic argument:

    class HelloResponse(ServiceStackResponse):
        result: str

    class Hello(ServiceStackRequest[HelloResponse]):
        name: str

        def path(self) -> str:
            return "/hello"

Requests that are not pydantic models can still be dispatched as long as they
expose a callable ``path()`` and a ``response_type`` attribute.
"""

from typing import Any, ClassVar, Generic, Literal, TypeVar, get_args

from pydantic import BaseModel

from servicestack.exceptions import ServiceStackConfigError, ServiceStackMethodError

# =============================================================================
# HTTP Methods
# =============================================================================

HttpMethod = Literal["GET", "POST", "PUT", "DELETE", "PATCH"]

HTTP_METHODS: frozenset[str] = frozenset(get_args(HttpMethod))
DEFAULT_METHOD: HttpMethod = "POST"

ResponseT = TypeVar("ResponseT")


def normalize_method(method: str) -> HttpMethod:
    """Upper-case a verb and check it against HTTP_METHODS.

    Raises:
        ServiceStackMethodError: If the verb is not one of the five supported.
    """
    verb = method.upper() if isinstance(method, str) else method
    if verb not in HTTP_METHODS:
        raise ServiceStackMethodError(str(method))
    return verb  # type: ignore[return-value]


# =============================================================================
# Base Models
# =============================================================================


class ServiceStackResponse(BaseModel):
    """Base for response models.

    Any type pydantic can validate is accepted as a response type; this base
    only marks intent.
    """


class ServiceStackRequest(BaseModel, Generic[ResponseT]):
    """Base for request models.

    Subclasses must implement ``path()`` and may override ``method()``.
    Dispatching a request whose class does not implement ``path()`` raises
    ServiceStackConfigError before any call is made.

    The response type comes from the generic argument, or from an explicit
    ``response_type`` class variable which takes precedence.
    """

    response_type: ClassVar[Any] = None

    def path(self) -> str:
        """Endpoint path for this request, e.g. "/hello" or f"/users/{self.id}".

        Must be overridden; the base implementation raises NotImplementedError,
        which the client reports as ServiceStackConfigError.
        """
        raise NotImplementedError(f"{type(self).__name__} must implement path()")

    def method(self) -> HttpMethod:
        """HTTP verb used by ``JsonServiceClient.send``."""
        return DEFAULT_METHOD


# =============================================================================
# Runtime Capability Checks
# =============================================================================


def resolve_path(request: Any) -> str:
    """Return the request's path, or fail fast if it has none."""
    path = getattr(request, "path", None)
    if not callable(path):
        raise ServiceStackConfigError(f"{type(request).__name__} does not define path()")
    try:
        resolved = path()
    except NotImplementedError as e:
        raise ServiceStackConfigError(str(e)) from e
    if not isinstance(resolved, str):
        raise ServiceStackConfigError(
            f"{type(request).__name__}.path() returned {type(resolved).__name__}, expected str"
        )
    return resolved


def resolve_method(request: Any) -> HttpMethod:
    """Return the request's declared verb, falling back to POST."""
    method = getattr(request, "method", None)
    if not callable(method):
        return DEFAULT_METHOD
    return normalize_method(method())


def resolve_response_type(request: Any) -> Any:
    """Return the response type bound to a request.

    An explicit ``response_type`` wins; otherwise the generic argument given to
    ServiceStackRequest is used, with the type arguments of generic
    intermediate bases substituted in. Given
    ``class QueryDb(ServiceStackRequest[QueryResponse[T]], Generic[T])``,
    ``class FindUsers(QueryDb[User])`` resolves to ``QueryResponse[User]``.

    Raises:
        ServiceStackConfigError: If no concrete response type is bound.
    """
    explicit = getattr(request, "response_type", None)
    if explicit is not None:
        return explicit

    declared = _declared_response_type(type(request))
    if declared is None or isinstance(declared, TypeVar):
        raise ServiceStackConfigError(
            f"{type(request).__name__} has no response type; "
            "subclass ServiceStackRequest[ResponseModel] or set response_type"
        )
    return declared


def _declared_response_type(cls: type) -> Any:
    """Response type declared for ``cls``, expressed in cls's own type parameters."""
    for klass in cls.__mro__:
        metadata = getattr(klass, "__pydantic_generic_metadata__", None)
        if not metadata or metadata.get("origin") is None:
            continue
        origin = metadata["origin"]
        args = metadata.get("args") or ()
        if origin is ServiceStackRequest:
            return args[0] if args else None

        parameters = origin.__pydantic_generic_metadata__.get("parameters") or ()
        return _substitute(_declared_response_type(origin), dict(zip(parameters, args)))
    return None


def _substitute(tp: Any, bindings: dict[Any, Any]) -> Any:
    """Replace type variables in ``tp`` according to ``bindings``."""
    if isinstance(tp, TypeVar):
        return bindings.get(tp, tp)

    metadata = getattr(tp, "__pydantic_generic_metadata__", None)
    if metadata is not None:
        if metadata.get("origin") is None or not metadata.get("parameters"):
            return tp
        args = tuple(_substitute(arg, bindings) for arg in metadata["args"])
        return metadata["origin"][args]

    # typing and builtin generic aliases, e.g. list[T] or dict[str, T]
    parameters = getattr(tp, "__parameters__", ())
    if parameters:
        return tp[tuple(bindings.get(param, param) for param in parameters)]
    return tp
