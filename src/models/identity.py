"""
Identity Data Model

Defines the profile record kept in the browser session once a customer logs in.
"""

import json
from dataclasses import dataclass, asdict

from webapp.services.errors import IdentityParseError

DEFAULT_JOIN_DATE = "Jan 2024"
DEFAULT_PROFILE_COMPLETION = 75

# Persisted key name -> attribute name
_FIELDS = {
    "name": "name",
    "email": "email",
    "joinDate": "join_date",
    "profileCompletion": "profile_completion",
}


@dataclass(frozen=True)
class Identity:
    """Display data for the current customer."""

    name: str
    email: str
    join_date: str = DEFAULT_JOIN_DATE
    profile_completion: int = DEFAULT_PROFILE_COMPLETION

    @property
    def avatar_initial(self):
        """First letter of the name, upper-cased, or "?" for a blank name."""
        name = self.name.strip()
        return name[0].upper() if name else "?"

    def to_dict(self):
        data = asdict(self)
        return {key: data[attr] for key, attr in _FIELDS.items()}

    def to_json(self):
        return json.dumps(self.to_dict())

    @classmethod
    def from_dict(cls, data):
        """
        Build an identity from a persisted mapping.

        ``name`` and ``email`` are required strings. ``joinDate`` and
        ``profileCompletion`` fall back to the guest defaults when missing.

        Raises:
            IdentityParseError: If the mapping does not fit the schema
        """
        if not isinstance(data, dict):
            raise IdentityParseError("Identity record must be a JSON object")

        for key in ("name", "email"):
            if key not in data:
                raise IdentityParseError(f"Identity record is missing '{key}'", field=key)
            if not isinstance(data[key], str):
                raise IdentityParseError(f"Identity field '{key}' must be a string", field=key)

        join_date = data.get("joinDate", DEFAULT_JOIN_DATE)
        if not isinstance(join_date, str):
            raise IdentityParseError("Identity field 'joinDate' must be a string", field="joinDate")

        completion = data.get("profileCompletion", DEFAULT_PROFILE_COMPLETION)
        if isinstance(completion, bool) or not isinstance(completion, (int, float)):
            raise IdentityParseError(
                "Identity field 'profileCompletion' must be a number", field="profileCompletion"
            )
        if not 0 <= completion <= 100:
            raise IdentityParseError(
                "Identity field 'profileCompletion' must be between 0 and 100", field="profileCompletion"
            )

        return cls(
            name=data["name"],
            email=data["email"],
            join_date=join_date,
            profile_completion=completion,
        )

    @classmethod
    def from_json(cls, text):
        """
        Parse the serialized form stored in the session.

        Raises:
            IdentityParseError: If the text is not JSON or does not fit the schema
        """
        try:
            data = json.loads(text)
        except (TypeError, ValueError) as e:
            raise IdentityParseError(f"Identity record is not valid JSON: {e}")
        return cls.from_dict(data)

    @classmethod
    def from_account(cls, account):
        """
        Build the identity for an account row returned by the identity store.

        The row goes through the same checks as a persisted record, so login
        never stores a marker the profile page would reject.

        Raises:
            IdentityParseError: If the account fields do not fit the schema
        """
        data = {
            "name": account.get("name") or "",
            "email": account.get("email"),
        }
        if account.get("join_date") is not None:
            data["joinDate"] = account["join_date"]
        if account.get("profile_completion") is not None:
            data["profileCompletion"] = account["profile_completion"]
        return cls.from_dict(data)


GUEST_IDENTITY = Identity(
    name="Guest",
    email="guest@example.com",
    join_date=DEFAULT_JOIN_DATE,
    profile_completion=DEFAULT_PROFILE_COMPLETION,
)
