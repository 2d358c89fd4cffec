"""Domain records returned by the breach-notification service.

Records are immutable and only ever built by the response decoder.
Each field carries its upstream (capitalized) JSON key as an alias.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

# A data class is just the category name, e.g. "Email addresses".
DataClass = str


class Breach(BaseModel):
    """A disclosed data breach.

    Only ``name`` is guaranteed; every other field is ``None`` when the
    service did not send it.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(alias="Name", min_length=1, description="Unique breach identifier (e.g., 'Adobe')")
    title: str | None = Field(default=None, alias="Title", description="Human-readable breach name")
    domain: str | None = Field(default=None, alias="Domain", description="Domain of the breached service")
    breach_date: str | None = Field(
        default=None,
        alias="BreachDate",
        description="Date the breach occurred (YYYY-MM-DD)",
    )
    added_date: str | None = Field(default=None, alias="AddedDate", description="Date breach was added")
    pwn_count: int | None = Field(default=None, alias="PwnCount", ge=0, description="Number of accounts exposed")
    description: str | None = Field(
        default=None,
        alias="Description",
        description="HTML description of the breach",
    )
    data_classes: tuple[DataClass, ...] | None = Field(
        default=None,
        alias="DataClasses",
        description="Types of data exposed (e.g., 'Email addresses', 'Passwords')",
    )
    is_verified: bool | None = Field(default=None, alias="IsVerified")
    is_sensitive: bool | None = Field(
        default=None,
        alias="IsSensitive",
        description="Breach is sensitive (e.g., adult sites)",
    )
    is_retired: bool | None = Field(default=None, alias="IsRetired")

    @property
    def exposed_passwords(self) -> bool:
        """Check if passwords were exposed in this breach."""
        return "Passwords" in (self.data_classes or ())

    @property
    def breach_datetime(self) -> datetime | None:
        """Parse breach date as datetime."""
        if self.breach_date is None:
            return None
        try:
            return datetime.strptime(self.breach_date, "%Y-%m-%d")
        except ValueError:
            return None


class Paste(BaseModel):
    """A public paste containing an account's data.

    Pastes are text documents uploaded to paste sites that contain
    personal data, often from data breaches.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    source: str = Field(alias="Source", description="Paste site name (e.g., 'Pastebin')")
    id: str = Field(alias="Id", description="Paste identifier")
    title: str | None = Field(default=None, alias="Title", description="Paste title if available")
    date: str | None = Field(default=None, alias="Date", description="Date paste was created")
    email_count: int = Field(alias="EmailCount", ge=0, description="Number of emails in paste")
