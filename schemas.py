"""
Argument and request schemas for the Post Bridge tools.

Tool arguments arrive in camelCase (the names agents see in each tool's
inputSchema) and are sent to the API in snake_case. Platform configuration
models are closed: unknown keys are rejected.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Annotated, Literal

from pydantic import (
    AfterValidator,
    AnyUrl,
    AwareDatetime,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    JsonValue,
    TypeAdapter,
    ValidationError,
    WithJsonSchema,
)
from pydantic.alias_generators import to_camel

from utils import format_timestamp


Platform = Literal[
    "bluesky", "facebook", "instagram", "linkedin", "pinterest",
    "threads", "tiktok", "twitter", "youtube",
]
PostStatus = Literal["posted", "scheduled", "processing"]
MediaType = Literal["image", "video"]
MimeType = Literal["image/png", "image/jpeg", "video/mp4", "video/quicktime"]

_url_adapter = TypeAdapter(AnyUrl)


def _check_url(value: str) -> str:
    # Validate only; forward the caller's exact string
    try:
        _url_adapter.validate_python(value)
    except ValidationError:
        raise ValueError(f"not a valid URL: {value!r}") from None
    return value


Url = Annotated[str, AfterValidator(_check_url), WithJsonSchema({"type": "string", "format": "uri"})]
NonEmptyStr = Annotated[str, Field(min_length=1)]
PositiveInt = Annotated[int, Field(gt=0)]
TimestampMs = Annotated[int, Field(ge=0, description="Video cover timestamp in milliseconds. Must be >= 0.")]


def _require_iso_string(value):
    if value is not None and not isinstance(value, str):
        raise ValueError("must be an ISO-8601 datetime string")
    return value


IsoTimestamp = Annotated[AwareDatetime, BeforeValidator(_require_iso_string)]


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel)


# ---------------------------------------------------------------------------
# Platform configurations
# ---------------------------------------------------------------------------

class _PlatformConfig(_CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, extra="forbid")

    # None only marks "not supplied"; an explicit null fails type validation

    caption: str = Field(None, description="Overrides the post caption for this network.")
    media: list[str] = Field(None, description="Overrides the post media. Use media IDs from Post Bridge.")


class BlueskyConfiguration(_PlatformConfig):
    """Bluesky-specific overrides."""


class FacebookConfiguration(_PlatformConfig):
    """Facebook-specific overrides."""

    placement: str = Field(None, description="Facebook placement type (e.g., feed, reels).")


class InstagramConfiguration(_PlatformConfig):
    """Instagram-specific overrides."""

    video_cover_timestamp_ms: TimestampMs = None
    placement: str = Field(None, description="Instagram placement type (e.g., feed, reels).")


class LinkedinConfiguration(_PlatformConfig):
    """LinkedIn-specific overrides."""


class PinterestConfiguration(_PlatformConfig):
    """Pinterest-specific overrides."""

    board_ids: list[str] = Field(None, description="Pinterest board IDs. If omitted, the default board is used.")
    link: Url = Field(None, description="Destination URL for the Pin.")
    video_cover_timestamp_ms: TimestampMs = None
    title: str = Field(None, description="Title for the Pin.")


class ThreadsConfiguration(_PlatformConfig):
    """Threads-specific overrides."""

    location: Literal["reels", "timeline"] = Field(
        None, description='Threads post location: "reels" or "timeline" (standard feed).'
    )


class TiktokConfiguration(_PlatformConfig):
    """TikTok-specific overrides."""

    title: str = Field(None, description="Overrides the post title for TikTok.")
    video_cover_timestamp_ms: TimestampMs = None
    draft: bool = Field(None, description="If true, save as a TikTok draft instead of publishing.")
    is_aigc: bool = Field(None, description='If true, label the video as "Creator labeled as AI-generated".')


class TwitterConfiguration(_PlatformConfig):
    """Twitter/X-specific overrides."""


class YoutubeConfiguration(_PlatformConfig):
    """YouTube-specific overrides."""

    title: str = Field(None, description="Overrides the video title for YouTube.")


class PlatformConfigurations(_CamelModel):
    """
    Per-network overrides of post-level fields. Only provided keys apply;
    everything else inherits from the post.
    """

    model_config = ConfigDict(alias_generator=to_camel, extra="forbid")

    bluesky: BlueskyConfiguration = None
    facebook: FacebookConfiguration = None
    instagram: InstagramConfiguration = None
    linkedin: LinkedinConfiguration = None
    pinterest: PinterestConfiguration = None
    threads: ThreadsConfiguration = None
    tiktok: TiktokConfiguration = None
    twitter: TwitterConfiguration = None
    youtube: YoutubeConfiguration = None

    def to_request(self) -> dict:
        """Dump only what the caller supplied, with API (snake_case) field names."""
        return self.model_dump(exclude_unset=True)


# ---------------------------------------------------------------------------
# Tool arguments
# ---------------------------------------------------------------------------

class PaginationArgs(_CamelModel):
    offset: int = Field(0, ge=0, description="Number of items to skip")
    limit: int = Field(50, ge=1, le=200, description="Number of items to return (max 200).")


class SocialAccountsListArgs(PaginationArgs):
    platform: Annotated[list[str], Field(min_length=1)] | None = Field(
        None, description='Filter by platform(s). Examples: ["twitter"], ["twitter","instagram"].'
    )
    username: Annotated[list[str], Field(min_length=1)] | None = Field(
        None, description='Filter by username(s). Examples: ["alice"], ["alice","bob"].'
    )


class SocialAccountGetArgs(_CamelModel):
    id: PositiveInt = Field(description="Social Account ID")


class PostsListArgs(PaginationArgs):
    platform: Annotated[list[Platform], Field(min_length=1)] | None = Field(
        None, description="Filter by platforms. Multiple values imply OR logic."
    )
    status: Annotated[list[PostStatus], Field(min_length=1)] | None = Field(
        None, description="Filter by post status. Multiple values imply OR logic."
    )


class PostResultsListArgs(PaginationArgs):
    post_id: Annotated[list[str], Field(min_length=1)] | None = Field(None, description="Filter by post IDs")
    platform: Annotated[list[str], Field(min_length=1)] | None = Field(None, description="Filter by platforms")


class MediaListArgs(PaginationArgs):
    post_id: Annotated[list[str], Field(min_length=1)] | None = Field(None, description="Filter by post IDs")
    type: Annotated[list[MediaType], Field(min_length=1)] | None = Field(None, description="Filter by media types")


class IdArgs(_CamelModel):
    id: NonEmptyStr = Field(description="Resource ID")


class PostCreateArgs(_CamelModel):
    caption: NonEmptyStr = Field(description="Caption text for the post")
    scheduled_at: IsoTimestamp | None = Field(None, description="ISO datetime string. Omit to post instantly.")
    platform_configurations: PlatformConfigurations | None = Field(
        None,
        description=(
            "Platform-specific configurations overriding post-level fields per network. "
            'Example: { "instagram": { "placement": "reels" }, "tiktok": { "draft": true } }'
        ),
    )
    account_configurations: list[JsonValue] | None = Field(None, description="Account-specific configurations")
    media: list[str] | None = Field(
        None, description="Array of media IDs (use media_upload tool to upload local files first)"
    )
    media_urls: list[Url] | None = Field(
        None, description="Array of publicly accessible media URLs; ignored if media is provided."
    )
    social_accounts: Annotated[list[PositiveInt], Field(min_length=1)] = Field(
        description="Array of social account IDs for posting"
    )
    is_draft: bool | None = Field(
        None, description="If true, creates the post as a draft (not processed until scheduled or posted)."
    )
    processing_enabled: bool | None = Field(
        None, description="If true, enable video processing to maximize compatibility; if false, skip it."
    )

    def to_request(self) -> dict:
        body = {"caption": self.caption, "social_accounts": list(self.social_accounts)}
        if self.scheduled_at is not None:
            body["scheduled_at"] = format_timestamp(self.scheduled_at)
        if self.platform_configurations is not None:
            body["platform_configurations"] = self.platform_configurations.to_request()
        if self.account_configurations is not None:
            body["account_configurations"] = self.account_configurations
        if self.media is not None:
            body["media"] = self.media
        if self.media_urls is not None:
            body["media_urls"] = self.media_urls
        if self.is_draft is not None:
            body["is_draft"] = self.is_draft
        if self.processing_enabled is not None:
            body["processing_enabled"] = self.processing_enabled
        return body


@dataclass(frozen=True)
class KeepSchedule:
    """scheduledAt omitted: leave the existing schedule alone."""


@dataclass(frozen=True)
class ClearSchedule:
    """scheduledAt explicitly null: publish now."""


@dataclass(frozen=True)
class Reschedule:
    at: datetime


ScheduleChange = KeepSchedule | ClearSchedule | Reschedule


class PostUpdateArgs(_CamelModel):
    id: NonEmptyStr = Field(description="Post ID")
    caption: str | None = Field(None, description="New caption text for the post. Omit to leave unchanged.")
    scheduled_at: IsoTimestamp | None = Field(
        None,
        description=(
            "Set to ISO datetime string to schedule, null to post instantly. "
            "If updating a scheduled post and you want to keep the schedule, pass the existing scheduled time."
        ),
    )
    platform_configurations: PlatformConfigurations | None = Field(
        None, description="Platform-specific configurations overriding post-level fields per network."
    )
    account_configurations: list[JsonValue] | None = Field(
        None, description="Account-specific configurations. Omit to leave unchanged."
    )
    media: list[str] | None = Field(
        None, description="Array of media IDs associated with the post. Omit to leave unchanged."
    )
    media_urls: list[Url] | None = Field(
        None, description="Array of publicly accessible media URLs. Ignored if media is provided."
    )
    social_accounts: list[PositiveInt] | None = Field(
        None, description="Array of social account IDs for posting. Omit to leave unchanged."
    )
    is_draft: bool | None = Field(
        None, description="If true, keeps the post as a draft; if false, ensures it will be processed."
    )
    processing_enabled: bool | None = Field(
        None, description="If true, enable video processing; if false, skip it. Omit to leave unchanged."
    )

    @property
    def schedule(self) -> ScheduleChange:
        if "scheduled_at" not in self.model_fields_set:
            return KeepSchedule()
        if self.scheduled_at is None:
            return ClearSchedule()
        return Reschedule(self.scheduled_at)

    def to_request(self) -> dict:
        body = {}
        if self.caption is not None:
            body["caption"] = self.caption

        schedule = self.schedule
        if isinstance(schedule, ClearSchedule):
            body["scheduled_at"] = None
        elif isinstance(schedule, Reschedule):
            body["scheduled_at"] = format_timestamp(schedule.at)

        if self.platform_configurations is not None:
            body["platform_configurations"] = self.platform_configurations.to_request()
        if self.account_configurations is not None:
            body["account_configurations"] = self.account_configurations
        if self.media is not None:
            body["media"] = self.media
        if self.media_urls is not None:
            body["media_urls"] = self.media_urls
        if self.social_accounts is not None:
            body["social_accounts"] = self.social_accounts
        if self.is_draft is not None:
            body["is_draft"] = self.is_draft
        if self.processing_enabled is not None:
            body["processing_enabled"] = self.processing_enabled
        return body


class CreateUploadUrlArgs(_CamelModel):
    name: NonEmptyStr = Field(description="Original file name (used for extension)")
    mime_type: MimeType = Field(description="MIME type of the media file")
    size_bytes: PositiveInt = Field(description="Size of the media file in bytes")


class MediaUploadArgs(_CamelModel):
    file_path: NonEmptyStr = Field(
        description="Absolute or relative path to the media file on the local filesystem"
    )


def input_schema(model: type[BaseModel]) -> dict:
    """JSON Schema for a tool's inputSchema, using the camelCase argument names."""
    return model.model_json_schema(by_alias=True)
