# sigtalk

sigtalk is a small messaging pair for POSIX systems. A server and a client
send text to each other using only the `SIGUSR1` and `SIGUSR2` signals. They
use no sockets, pipes or files.

## How it works

- The client sends each byte of the message one bit at a time, starting with
  the least significant bit. `SIGUSR1` carries a 1 bit and `SIGUSR2` carries a
  0 bit. After the last byte it sends a terminating zero byte.
- After every bit, the client blocks until the server replies with `SIGUSR1`.
  Only then does it send the next bit.
- The server builds the bits back into a byte for the process that is
  sending. When a different process starts sending, any partial byte is
  thrown away. The server writes each finished byte to standard output. A
  zero byte is written as a newline.

## Installation

```
pip install .
```

## Usage

Start the server. It prints its process ID and then waits for signals until
you interrupt it with Ctrl+C:

```
sigtalk-server
```

```
Process ID (PID): 12345
```

From another terminal, send a message to that PID:

```
sigtalk-client 12345 "hello there"
```

The server prints `hello there` and then a newline.

The PID is read the same way as `sigtalk.textutils.atoi`: leading whitespace
and an optional sign are skipped, and then the leading digits are used. The
client exits with status 1 in any of these cases:

- it is not given exactly two arguments;
- the PID is not a positive number;
- the PID does not exist or cannot be signalled.

If it succeeds, it exits with status 0.

## Library use

- `sigtalk.protocol.byte_to_bits(value)` returns the eight bits of a byte,
  least significant bit first.
- `sigtalk.protocol.message_bits(message)` yields the bits of a `str` (encoded
  as UTF-8) or of a `bytes` message, followed by the bits of the zero byte at
  the end. It raises `ValueError` if the message contains a NUL byte.
- `sigtalk.protocol.CharDecoder.feed(sender, bit)` adds one bit from a sender.
  It returns the byte when its eighth bit arrives, and `None` before that.
- `sigtalk.server.Server(out)` writes decoded bytes to any binary stream.
  `handle(sender, signum)` processes one signal and sends `SIGUSR1` back to the
  sender if the sender's PID is positive. `serve_forever()` prints the process
  ID and then waits for signals.
- `sigtalk.client.parse_pid(text)` checks a server PID.
  `send_byte(server_pid, value)` sends a single byte.
  `send_message(server_pid, message)` sends a message and its terminator.

The package also has some helpers that follow C string rules, in
`sigtalk.textutils`. These are `atoi`, `itoa`, `split`, `strtrim`, `substr`,
`strnstr`, `strncmp`, `memcmp`, `strlcpy`, `strlcat`, `strmapi`, `strchr` and
`strrchr`. They return new values instead of writing into buffers. For
example, `strlcpy` and `strlcat` return a pair: the resulting text and the
length that was needed.

The ASCII character tests `isalpha`, `isdigit`, `isalnum`, `isascii` and
`isprint` are in `sigtalk.charclass`. That module also has `toupper` and
`tolower`. Each of these functions takes either an integer code point or a
single-character string.

## Limitations

- The server waits for signals with `signal.sigwaitinfo`. Python provides this
  function on Linux, but not on macOS or Windows.
- The client has no timeout. If the server stops replying, the client waits
  forever.
- If two clients send at the same time, their bytes are mixed. The server
  only tracks the sender of the current byte.