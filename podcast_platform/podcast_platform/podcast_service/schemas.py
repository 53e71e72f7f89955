from pydantic import BaseModel, ConfigDict

from typing import List, Optional

from .models import Episode, Podcast, User, UserRole


# Accounts
class CreateAccountInput(BaseModel):
    email: str
    password: str
    role: Optional[UserRole] = None


class LoginInput(BaseModel):
    email: str
    password: str


class EditProfileInput(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


# Podcasts
class CreatePodcastInput(BaseModel):
    title: str
    category: str
    rating: float


class UpdatePodcastPayload(BaseModel):
    title: Optional[str] = None
    category: Optional[str] = None
    rating: Optional[float] = None


class UpdatePodcastInput(BaseModel):
    id: int
    payload: UpdatePodcastPayload


class EpisodesSearchInput(BaseModel):
    podcast_id: int
    episode_id: int


class CreateEpisodeInput(BaseModel):
    podcast_id: int
    title: str
    category: str


class UpdateEpisodeInput(BaseModel):
    podcast_id: int
    episode_id: int
    title: Optional[str] = None
    category: Optional[str] = None


# Results
class CoreOutput(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    ok: bool
    error: Optional[str] = None


class LoginOutput(CoreOutput):
    token: Optional[str] = None


class UserProfileOutput(CoreOutput):
    user: Optional[User] = None


class PodcastsOutput(CoreOutput):
    podcasts: Optional[List[Podcast]] = None


class PodcastOutput(CoreOutput):
    podcast: Optional[Podcast] = None


class CreatePodcastOutput(CoreOutput):
    id: Optional[int] = None


class EpisodesOutput(CoreOutput):
    episodes: Optional[List[Episode]] = None


class EpisodeOutput(CoreOutput):
    episode: Optional[Episode] = None


class CreateEpisodeOutput(CoreOutput):
    id: Optional[int] = None
