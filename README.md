# rpcroute

Building blocks for JSON-RPC 2.0 in Python. The package works on already decoded JSON values:
`dict`, `list`, `str`, `int`, `float`, `bool` and `None`. It has no dependencies outside the
standard library.

## What it provides

- `rpcroute.request`: `RpcRequest.from_value(value, checks=RequestChecks.ALL)` checks a request
  object and parses it. It checks that `"jsonrpc"` is `"2.0"`, that `method` is a string, and that
  `id` is a string, a 64-bit integer or null. Pass `RequestChecks.VERSION`, `RequestChecks.ID` or
  `RequestChecks.NONE` to choose which checks run. Without the `ID` check, a missing or invalid id
  becomes a null id. `RpcRequest.to_value()` writes the request back out and leaves out `params`
  when there are none.
- `rpcroute.notification`: `RpcNotification.from_value(value)` checks a notification the same way.
  It also requires `params`, when present, to be an array or an object, and it refuses any `id`
  member. `RpcNotification.from_request(request)` drops a request's id. `to_value()` writes the
  notification as JSON.
- `rpcroute.parsing_errors`: every request and notification failure raises a subclass of
  `RpcRequestParsingError`, which is itself a `ValueError`. The subclasses are `RequestInvalidType`,
  `ParamsInvalidType`, `VersionMissing`, `VersionInvalid`, `MethodMissing`, `MethodInvalidType`,
  `NotificationHasId`, `IdMissing`, `IdInvalid`, `MethodInvalid` and `ParseFailure`. Each one keeps
  the id and method it could find, so the failure can be reported.
- `rpcroute.rpc_id`: `RpcId` wraps a string, an integer or `None`.
  - `RpcId.from_value` and `RpcId.to_value` convert to and from JSON.
  - `RpcId.new_uuid_v4()` and `RpcId.new_uuid_v7()` generate new string ids. Each has variants
    ending in `_base64`, `_base64url` and `_base58`.
  - `RpcId.from_scheme(kind, encoding)` takes an `IdSchemeKind` and an `IdSchemeEncoding`.
- `rpcroute.resources`: a type-keyed store. `Resources.builder().append(value).build()` freezes the
  collected values. `Resources.get(kind)` looks a value up by its exact type.
  `Resources.with_overlay(other)` puts another set of resources on top, and that set is searched
  first. `from_resources(resources, kind)` raises `ResourceNotFound` when the type is missing, or
  returns `None` when `kind` is `Optional[X]`. `resources_builder(*values)` is a shortcut for
  building from several values at once.
- `rpcroute.errors`: the `RouterError` family:
  - `MethodUnknown`
  - `ParamsMissingButRequested`
  - `ParamsParsingError`
  - `ResourceNotFound`
  - `HandlerResultSerializeError`
  - `HandlerError`

  `into_handler_error(value)` wraps any application error in a `HandlerError`. The wrapped error
  can be read back by its exact type with `get(kind)` or taken out with `remove(kind)`.
- `rpcroute.call`: `CallSuccess(id, method, value)` and the exception `CallError(id, method, error)`
  hold the outcome of a call, together with its id and method name.
- `rpcroute.rpc_error`: `RpcError` is the JSON-RPC error object. It has the standard codes
  (`CODE_PARSE_ERROR`, `CODE_INVALID_REQUEST`, `CODE_METHOD_NOT_FOUND`, `CODE_INVALID_PARAMS`,
  `CODE_INTERNAL_ERROR`), a constructor for each of them, and `from_router_error` and
  `from_call_error`, which map router errors to those codes.
- `rpcroute.response`: `RpcResponse.from_call(outcome)` builds an `RpcSuccessResponse` or an
  `RpcErrorResponse`. `RpcResponse.from_value(value)` parses a response and raises a subclass of
  `RpcResponseParsingError` (for example `MissingId` or `BothResultAndError`) when the response is
  invalid.
- `rpcroute.support`: `get_json_type(value)` classifies a JSON value as a `JsonType`.

## Example

```python
from rpcroute.call import CallError, CallSuccess
from rpcroute.errors import MethodUnknown
from rpcroute.request import RpcRequest
from rpcroute.response import RpcResponse

request = RpcRequest.from_value(
    {"jsonrpc": "2.0", "id": "client-1", "method": "get_task", "params": {"id": 123}}
)

success = CallSuccess(id=request.id, method=request.method, value={"id": 123, "done": False})
print(RpcResponse.from_call(success).to_value())
# {'jsonrpc': '2.0', 'id': 'client-1', 'result': {'id': 123, 'done': False}}

failure = CallError(request.id, request.method, MethodUnknown())
print(RpcResponse.from_call(failure).to_value())
# {'jsonrpc': '2.0', 'id': 'client-1',
#  'error': {'code': -32601, 'message': 'Method not found', 'data': 'MethodUnknown'}}
```

Recovering an application error:

```python
from rpcroute.errors import into_handler_error

handler_error = into_handler_error("Always a String error")
assert handler_error.get(str) == "Always a String error"
assert handler_error.remove(str) == "Always a String error"
assert handler_error.get(str) is None
```

## What it does not do

The package has no method router and no handler dispatch. Nothing in it maps method names to
functions, calls them with resources and params, or produces `CallSuccess` and `CallError`
outcomes for you. Your code builds those itself, as in the example above. The package also does
not convert `params` into typed objects, and it does not decode or encode JSON text: use the
`json` module for that.

## Running the tests

```
pip install -e ".[test]"
pytest
```