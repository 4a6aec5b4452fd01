"""Domain Types — verifies identifiers, roles and labels.

Tests:
    - Generated user ids follow user_<millis>_<9 base36 chars>
    - Generated ids differ across calls
    - Exactly two roles; Guest is a label only
"""

import re

from campushub.core.domain_types import (
    CURRENT_USER_KEY, GUEST_DISPLAY_NAME, RoleLabel, UserRole, new_user_id,
)

_ID_PATTERN = re.compile(r"^user_\d{13,}_[0-9a-z]{9}$")


def test_generated_id_shape():
    assert _ID_PATTERN.match(new_user_id())


def test_generated_ids_are_unique_in_practice():
    ids = {new_user_id() for _ in range(500)}
    assert len(ids) == 500


def test_exactly_two_roles():
    assert set(UserRole) == {UserRole.ADMIN, UserRole.STUDENT}


def test_role_labels():
    assert [label.value for label in RoleLabel] == ["Admin", "Student", "Guest"]
    assert GUEST_DISPLAY_NAME == RoleLabel.GUEST.value


def test_session_key_is_single_constant():
    assert CURRENT_USER_KEY == "campushub_current_user"
