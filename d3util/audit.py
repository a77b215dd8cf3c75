"""Audit trail of security-relevant actions, kept in memory and appended to a CSV log."""

from __future__ import annotations

import inspect
import os
import sys
import threading
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, auto
from types import FrameType
from typing import Callable, Iterator, Optional, TextIO

from d3util.debug import debug_log

CSV_HEADER = (
    "Timestamp,User ID,IP Address,Action Type,Action Description,"
    "Result,Details,Source Location"
)
_SYSTEM_USER = "SYSTEM"
_LOCAL_IP = "127.0.0.1"


class AuditActionType(Enum):
    """Kind of action being audited."""

    AUTHENTICATION = auto()
    ACCOUNT_MANAGEMENT = auto()
    CHARACTER_MANAGEMENT = auto()
    GAME_SESSION = auto()
    CONFIGURATION = auto()
    ADMIN_ACTION = auto()
    SECURITY = auto()
    DATABASE = auto()
    NETWORK = auto()
    CUSTOM = auto()

    def __str__(self) -> str:
        return self.name


class AuditResult(Enum):
    """Outcome of an audited action."""

    SUCCESS = auto()
    FAILURE = auto()
    WARNING = auto()
    UNAUTHORIZED = auto()

    def __str__(self) -> str:
        return self.name


@dataclass
class AuditEntry:
    """One audited action."""

    user_id: str
    ip_address: str
    action_type: AuditActionType
    action_description: str
    result: AuditResult
    details: str = ""
    source_location: str = ""
    timestamp: datetime = field(default_factory=datetime.now)


AuditCallback = Callable[[AuditEntry], None]


def _format_timestamp(moment: datetime) -> str:
    return moment.strftime("%Y-%m-%d %H:%M:%S") + f".{moment.microsecond // 1000:03d}"


def _location_of(frame: Optional[FrameType]) -> str:
    if frame is None:
        return "<unknown>:0 <unknown>"
    filename = os.path.basename(frame.f_code.co_filename)
    return f"{filename}:{frame.f_lineno} {frame.f_code.co_name}"


def _caller_location(depth: int = 1) -> str:
    """Location of the frame ``depth`` levels above the function calling this."""
    frame = inspect.currentframe()
    target = frame.f_back if frame is not None else None
    for _ in range(depth):
        target = target.f_back if target is not None else None
    location = _location_of(target)
    del frame, target
    return location


def _csv_line(entry: AuditEntry) -> str:
    quoted = (
        entry.user_id,
        entry.ip_address,
        str(entry.action_type),
        entry.action_description,
        str(entry.result),
        entry.details,
        entry.source_location,
    )
    return _format_timestamp(entry.timestamp) + "," + ",".join(f'"{value}"' for value in quoted)


class AuditLog:
    """Thread-safe audit log with a bounded in-memory history."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._file: Optional[TextIO] = None
        self._entries: deque[AuditEntry] = deque(maxlen=1000)
        self._callback: Optional[AuditCallback] = None
        self._max_entries = 1000
        self._enabled = False
        self._initialized = False
        self._log_file_path = ""

    def __enter__(self) -> "AuditLog":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.shutdown()

    def _system_entry(self, description: str, details: str, location: str) -> AuditEntry:
        return AuditEntry(
            user_id=_SYSTEM_USER,
            ip_address=_LOCAL_IP,
            action_type=AuditActionType.CONFIGURATION,
            action_description=description,
            result=AuditResult.SUCCESS,
            details=details,
            source_location=location,
        )

    def _record(self, entry: AuditEntry) -> None:
        self._write(entry)
        self._entries.append(entry)

    def _write(self, entry: AuditEntry) -> None:
        if self._file is None:
            return
        try:
            self._file.write(_csv_line(entry) + "\n")
            self._file.flush()
        except OSError as exc:
            print(f"Error writing to audit log: {exc}", file=sys.stderr)

    def init(
        self,
        log_file_path: str = "audit.log",
        max_entries: int = 1000,
        enabled: bool = True,
    ) -> None:
        """Open (or reopen) the log file and start recording.

        Raises OSError when the directory or file cannot be created.
        """
        if max_entries < 0:
            raise ValueError("max_entries must not be negative")
        with self._lock:
            if self._file is not None:
                self._file.close()
                self._file = None

            self._log_file_path = os.fspath(log_file_path)
            self._max_entries = max_entries
            self._enabled = enabled
            self._entries = deque(self._entries, maxlen=max_entries)

            parent = os.path.dirname(self._log_file_path)
            if parent:
                os.makedirs(parent, exist_ok=True)

            self._file = open(self._log_file_path, "a", encoding="utf-8", newline="")
            if self._file.tell() == 0:
                self._file.write(CSV_HEADER + "\n")
                self._file.flush()

            self._initialized = True
            self._record(
                self._system_entry(
                    "Audit Log Initialized",
                    f"Max entries: {max_entries}, Enabled: {'true' if enabled else 'false'}",
                    _caller_location(0),
                )
            )

    def log_action(
        self,
        user_id: str,
        ip_address: str,
        action_type: AuditActionType,
        action_description: str,
        result: AuditResult,
        details: str = "",
        source_location: Optional[str] = None,
    ) -> None:
        """Record an action; does nothing unless the log is initialised and enabled.

        Without ``source_location`` the caller's file, line and function are used.
        """
        if not self._enabled or not self._initialized:
            return
        if source_location is None:
            source_location = _caller_location(1)
        entry = AuditEntry(
            user_id=user_id,
            ip_address=ip_address,
            action_type=action_type,
            action_description=action_description,
            result=result,
            details=details,
            source_location=source_location,
        )
        with self._lock:
            self._record(entry)
            callback = self._callback

        if callback is not None:
            try:
                callback(entry)
            except Exception as exc:  # a faulty callback must not break auditing
                debug_log(f"Exception in audit callback: {exc}")

    def get_recent_entries(self, count: int) -> list[AuditEntry]:
        """Return up to ``count`` most recent entries, oldest first."""
        with self._lock:
            if not self._enabled or not self._initialized:
                return []
            if count >= len(self._entries):
                return list(self._entries)
            if count <= 0:
                return []
            return list(self._entries)[-count:]

    def get_entries_by_filter(self, predicate: Callable[[AuditEntry], bool]) -> list[AuditEntry]:
        """Return the held entries for which ``predicate`` is true.

        Entries on which the predicate raises are skipped.
        """
        with self._lock:
            if not self._enabled or not self._initialized:
                return []
            entries = list(self._entries)

        def _matches(entry: AuditEntry) -> bool:
            try:
                return bool(predicate(entry))
            except Exception as exc:
                debug_log(f"Exception in filter function: {exc}")
                return False

        return [entry for entry in entries if _matches(entry)]

    def export_to_csv(self, path: str) -> None:
        """Write the held entries to a CSV file.

        Raises RuntimeError when the log is not active and OSError when the
        file cannot be written.
        """
        with self._lock:
            if not self._enabled or not self._initialized:
                raise RuntimeError("audit log is not active")
            parent = os.path.dirname(os.fspath(path))
            if parent:
                os.makedirs(parent, exist_ok=True)
            with open(path, "w", encoding="utf-8", newline="") as handle:
                handle.write(CSV_HEADER + "\n")
                handle.writelines(_csv_line(entry) + "\n" for entry in self._entries)

    def set_audit_callback(self, callback: Optional[AuditCallback]) -> None:
        """Set a function called with every entry recorded by log_action."""
        with self._lock:
            self._callback = callback

    def set_enabled(self, enabled: bool) -> None:
        """Switch recording on or off; switching on is itself recorded."""
        with self._lock:
            if self._enabled == enabled:
                return
            self._enabled = enabled
            if self._initialized and enabled:
                self._record(
                    self._system_entry(
                        "Audit Log Status Changed",
                        "Enabled: true",
                        _caller_location(0),
                    )
                )

    def is_enabled(self) -> bool:
        return self._enabled and self._initialized

    def shutdown(self) -> None:
        """Record the shutdown, close the file and forget the held entries."""
        with self._lock:
            if not self._initialized:
                return
            if self._enabled and self._file is not None:
                self._write(
                    self._system_entry("Audit Log Shutdown", "Normal shutdown", _caller_location(0))
                )
            if self._file is not None:
                self._file.close()
                self._file = None
            self._entries.clear()
            self._initialized = False

    def format_entry(self, entry: AuditEntry) -> str:
        """One-line human-readable form of an entry."""
        return (
            f"{_format_timestamp(entry.timestamp)} [{entry.result}] [{entry.action_type}] "
            f"User: {entry.user_id} IP: {entry.ip_address} "
            f"Action: {entry.action_description} Details: {entry.details} "
            f"Location: {entry.source_location}"
        )

    def iter_entries(self) -> Iterator[AuditEntry]:
        """Iterate over a snapshot of the held entries."""
        with self._lock:
            snapshot = list(self._entries)
        return iter(snapshot)


_instance = AuditLog()


def get_audit_log() -> AuditLog:
    """Return the shared AuditLog instance."""
    return _instance


def audit_log(
    user_id: str,
    ip_address: str,
    action_type: AuditActionType,
    action_description: str,
    result: AuditResult,
    details: str = "",
) -> None:
    """Record an action on the shared log, tagged with the caller's location."""
    _instance.log_action(
        user_id,
        ip_address,
        action_type,
        action_description,
        result,
        details,
        _caller_location(1),
    )