# distcalc

distcalc is a small TCP server and a client that goes with it.

The server keeps a single calculator value, and every connected client works on that same value. The value is an unsigned 8-bit integer, so it is always between 0 and 255. Addition, subtraction and multiplication wrap around when they pass either end. Division rounds down.

## Installation

```
pip install .
```

To install the test tools as well:

```
pip install ".[test]"
```

## Running the server

```
distcalc-server 127.0.0.1:8080
```

The argument is `host:port`. An IPv6 host may be written in brackets, for example `[::1]:8080`. The server starts a new thread for each connection, and all threads update the shared value under one lock. It keeps running until it is interrupted with Ctrl-C.

If you give the wrong number of arguments, the server writes `ERROR "invalid number of arguments"` to standard error. If the address cannot be bound, it writes `ERROR "socket failure"`.

## Running the client

```
distcalc-client 127.0.0.1:8080 operations.txt
```

The client reads the file one line at a time. It sends each line to the server as `OP <line>` and waits for the reply. Once the file is finished, it sends `GET` and prints the value it gets back to standard output.

Each line of the file holds an operator and an operand:

```
+ 10
* 3
- 1
/ 2
```

The operand must be a whole number from 0 to 255. A leading `+` sign is allowed.

When the server rejects a line, the client copies the `ERROR` reply to standard error and continues with the next line. A rejected line does not change the value. Lines are rejected for these reasons:

- the operator is unknown
- the operand is not a valid integer
- the operation divides by zero

The client writes its own failures to standard error:

- `ERROR "invalid number of arguments"` when it is not given exactly two arguments
- `ERROR "socket failure"` when it cannot connect
- `ERROR "file open failure"` when it cannot open the file

## Protocol

Every request and every reply is one line of text ending in a newline.

| Request        | Reply                                           |
|----------------|-------------------------------------------------|
| `OP + 10`      | `OK`                                            |
| `OP / 0`       | `ERROR "division by zero"`                      |
| `OP % 3`       | `ERROR "parsing error: unknown operation: %"`   |
| `OP + five`    | `ERROR "parsing error: invalid integer: five"`  |
| `GET`          | `VALUE <n>`                                     |
| anything else  | `ERROR "unexpected message: <first word>"`      |

If a request has the wrong number of words, the reply is `ERROR "invalid number of arguments"`. A correct `OP` request has three words and a correct `GET` request has one. In an `OP` request the operand is checked before the operator. So if both are wrong, the reply reports the operand.

## Using it as a library

```python
from distcalc.calculator import Calculator
from distcalc.operation import parse_operation

calc = Calculator()
calc.apply(parse_operation("OP + 250"))
calc.apply(parse_operation("OP + 10"))
print(calc.value)  # 4
```

`Calculator.apply` returns the current value for a `GET` operation and `None` for any other operation.

`distcalc.operation.make_operation(operator, operand)` builds an arithmetic `Operation` from its two text parts.

Replies are represented by the classes in `distcalc.response`:

- `OkResponse`
- `ValueResponse`
- `ErrorResponse`

Each of them provides `message()`, `send(stream)` for a binary stream, and `eprint()`.

When something fails, the library raises a subclass of `distcalc.errors.CalculatorError`. The `protocol_message()` method of the exception returns the `ERROR` line the server would send for it.

## Limitations

The value exists only in the memory of the running server. It starts at 0 every time the server starts, and nothing is saved when the server stops. There is no command to reset the value or to shut the server down remotely.