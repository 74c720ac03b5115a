"""DCDirectory Admin Session - Record Management Surface.

An admin session edits one draft record at a time. Form edits are applied
to the draft through the typed form fields; nothing reaches the store until
``save`` commits the whole draft.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional, Tuple

from dcdirectory_core.engine import DirectoryEngine
from dcdirectory_core.errors import NoDraftError, NotAuthenticatedError
from dcdirectory_core.mutation.setters import FORM_FIELDS, apply_form_edit
from dcdirectory_core.records.factory import generate_record_id, new_record
from dcdirectory_core.records.model import FacilityRecord

logger = logging.getLogger(__name__)

LOGIN_ERROR = "Invalid email or password"


class AdminSession:
    """Authenticated create / edit / delete workflow over a directory engine."""

    def __init__(self, engine: DirectoryEngine):
        """Initialize admin session.

        Args:
            engine: Directory engine whose store is edited
        """
        self._engine = engine
        self._authenticated = False
        self._draft: Optional[FacilityRecord] = None
        self._editing_id: Optional[str] = None
        self.last_error = ""

    @property
    def is_authenticated(self) -> bool:
        return self._authenticated

    @property
    def draft(self) -> Optional[FacilityRecord]:
        return self._draft

    @property
    def is_creating(self) -> bool:
        return self._draft is not None and self._editing_id is None

    def login(self, email: str, password: str) -> bool:
        """Check credentials; a failed attempt closes any open session."""
        if not self._engine.authenticate(email, password):
            self.logout()
            self.last_error = LOGIN_ERROR
            return False
        self._authenticated = True
        self.last_error = ""
        logger.info(f"Admin logged in: {email}")
        return True

    def logout(self) -> None:
        self._authenticated = False
        self._draft = None
        self._editing_id = None
        logger.info("Admin logged out")

    def _require_login(self) -> None:
        if not self._authenticated:
            raise NotAuthenticatedError("Admin login required")

    def _require_draft(self) -> FacilityRecord:
        if self._draft is None:
            raise NoDraftError("No record is being edited")
        return self._draft

    def list_records(self, search_term: str = "") -> Tuple[FacilityRecord, ...]:
        """Records for the admin table, filtered by name or location."""
        self._require_login()
        return self._engine.admin_search(search_term)

    def begin_create(self) -> FacilityRecord:
        """Open a draft for a new record with default values and a fresh id."""
        self._require_login()
        existing = set(self._engine.store.ids())
        self._draft = new_record(record_id=generate_record_id(existing))
        self._editing_id = None
        return self._draft

    def begin_edit(self, record_id: str) -> FacilityRecord:
        """Open a draft from an existing record.

        Raises:
            NotFoundError: If no record has this id
        """
        self._require_login()
        self._draft = self._engine.require(record_id)
        self._editing_id = record_id
        return self._draft

    def form_values(self) -> Dict[str, Any]:
        """Current draft value for every editable form field."""
        draft = self._require_draft()
        return {key: form_field.current(draft) for key, form_field in FORM_FIELDS.items()}

    def edit(self, key: str, raw_value: Any) -> FacilityRecord:
        """Apply one form field edit to the draft.

        Raises:
            PathError: If ``key`` is not an editable field
            RecordValidationError: If the raw value cannot be parsed
        """
        self._require_login()
        self._draft = apply_form_edit(self._require_draft(), key, raw_value)
        return self._draft

    def save(self) -> FacilityRecord:
        """Commit the draft: insert when creating, replace by id otherwise.

        The draft stays open if the store rejects it.
        """
        self._require_login()
        draft = self._require_draft()
        if self._editing_id is None:
            self._engine.insert(draft)
            logger.info(f"Created record: {draft.id}")
        else:
            self._engine.update(self._editing_id, draft)
            logger.info(f"Updated record: {draft.id}")
        self._draft = None
        self._editing_id = None
        return draft

    def cancel(self) -> None:
        """Discard the draft."""
        self._draft = None
        self._editing_id = None

    def delete(self, record_id: str, confirm: Callable[[], bool]) -> bool:
        """Delete a record after the operator confirms.

        Returns:
            True if a record was removed
        """
        self._require_login()
        if not confirm():
            return False
        removed = self._engine.delete(record_id)
        if removed:
            logger.info(f"Deleted record: {record_id}")
        return removed


__all__ = ["AdminSession", "LOGIN_ERROR"]
