# d3util

`d3util` is a set of small building blocks for a game server. It covers debug logging and timing, string and path helpers, hashing, encoding and AES, and an audit trail written to a CSV file.

## Install

```
pip install .
```

To also install the test tools:

```
pip install .[test]
```

## Modules

### `d3util.debug`

`Debug` stays silent until you call `init(True)`. After that, `log(message)` prints a `[DEBUG]` line. The line holds a millisecond timestamp, the thread id, and the caller's file, line and function. Each formatted line also goes to a callback that you set with `set_log_callback`.

`start_timer(name)` returns a timer id, or -1 when debug output is off. `stop_timer(timer_id)` logs the time that has passed since that timer started.

`get_debug()` returns the shared instance. `debug_log(message)` logs through the shared instance.

### `d3util.string_utils`

- Trimming: `trim`, `trim_left` and `trim_right` remove ASCII whitespace.
- Splitting and joining: `split` takes a one-character delimiter and drops a trailing empty field. `join` is the counterpart.
- Case: `to_lower` and `to_upper` change ASCII letters only.
- Checks and replacement: `starts_with`, `ends_with`, and `replace`. The substring given to `replace` must not be empty.
- Formatting:
  - `current_time_string(fmt)` formats the current local time with an strftime pattern.
  - `to_hex(value, byte_width)` returns zero-padded hex digits.

### `d3util.file_utils`

- Checks: `file_exists` and `directory_exists`.
- Reading:
  - `read_file` returns the whole text of a file.
  - `read_file_lines` returns the lines without their newlines.
- Writing: `write_file` and `write_file_lines` both create the parent directory when it is missing. Both take an `append` flag.
- Directories: `create_directory(path, recursive=True)` does nothing when the directory already exists. It raises `OSError` when the directory cannot be created.
- Deletion: `delete_file` returns `False` when nothing exists at the path.
- Path parts: `get_basename`, `get_dirname` and `get_extension`.
- Path building:
  - `normalize_path` normalises a path lexically, without looking at the disk.
  - `join_path` accepts separate components or a single list or tuple of them.

### `d3util.crypto_utils`

- Hashing: `sha1`, `sha256` and `md5` return lowercase hex digests.
- Random data: `generate_random_string` and `generate_random_bytes`. Both draw from the `secrets` module.
- Base64:
  - `base64_encode` breaks its output into lines of 64 characters.
  - `base64_decode` ignores whitespace and raises `CryptoError` on invalid input.
- Hex: `hex_encode` and `hex_decode`. `hex_decode` raises `ValueError` on invalid digits.
- Encryption: `aes_encrypt(data, key, iv)` uses AES-256-CBC with PKCS#7 padding and returns base64 text. `aes_decrypt` reverses it and returns the plaintext bytes.
  - A key that is not 32 bytes, or an IV that is not 16 bytes, raises `ValueError`.
  - Ciphertext that cannot be decrypted raises `CryptoError`.
- Passwords: `hash_password(password, salt)` returns the SHA-256 hex digest of the salt followed by the password. `verify_password(password, salt, password_hash)` compares against that digest.

### `d3util.audit`

`AuditLog.init(path, max_entries, enabled)` opens the CSV log in append mode. It writes the header line when the file is new. It raises `OSError` when the file cannot be opened.

Each recorded `AuditEntry` is written to the file and kept in memory. The memory cache holds at most `max_entries` items. Each entry carries an `AuditActionType` and an `AuditResult`.

| Method | What it does |
| --- | --- |
| `log_action` | Records an entry. |
| `get_recent_entries` | Returns the most recent entries. |
| `get_entries_by_filter` | Returns the entries that match a predicate. |
| `iter_entries` | Iterates over the cached entries. |
| `export_to_csv` | Writes the cached entries to a file. Raises `RuntimeError` when the log is not active. |
| `format_entry` | Returns an entry as one readable line. |
| `set_audit_callback` | Sets a callback. |
| `set_enabled` | Turns recording on or off. |
| `is_enabled` | Tells whether recording is on. |
| `shutdown` | Closes the log. |

Each of `init`, turning the log back on with `set_enabled`, and `shutdown` writes an entry of its own to the log.

`AuditLog` also works as a context manager and calls `shutdown` on exit.

`get_audit_log()` returns the shared log. `audit_log(...)` records one entry on it and tags the entry with the caller's location.

## Example

```python
from d3util.audit import AuditActionType, AuditResult, audit_log, get_audit_log
from d3util.crypto_utils import hash_password, verify_password

log = get_audit_log()
log.init("audit.log", 100, True)

audit_log("alice", "127.0.0.1", AuditActionType.AUTHENTICATION,
          "Login Attempt", AuditResult.SUCCESS, "Login successful")

for entry in log.get_recent_entries(5):
    print(log.format_entry(entry))

password = "password"
digest = hash_password(password, "salt")
assert verify_password(password, "salt", digest)

log.shutdown()
```

## What it does not do

This package provides only the helpers listed above. It does not:

- run a server,
- store accounts or characters,
- provide a command-line program.

## Tests

```
pytest
```