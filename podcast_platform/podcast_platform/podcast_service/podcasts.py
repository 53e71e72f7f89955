"""
Catalog service for podcasts and the episodes they own.

Episodes are only reached through their podcast: every episode operation
resolves the podcast first (``get_podcast`` -> ``get_episodes`` ->
``get_episode``) and hands back the resolver's failure result unchanged.
Only the final mutation adds new failure cases.
"""
import logging

from .errors import NotFoundError
from .models import Episode
from .repositories import PodcastStore
from .schemas import (
    CoreOutput,
    CreateEpisodeInput,
    CreateEpisodeOutput,
    CreatePodcastInput,
    CreatePodcastOutput,
    EpisodeOutput,
    EpisodesOutput,
    EpisodesSearchInput,
    PodcastOutput,
    PodcastsOutput,
    UpdateEpisodeInput,
    UpdatePodcastInput,
)

logger = logging.getLogger(__name__)

INTERNAL_SERVER_ERROR = "Internal server error occurred."


def _supplied_fields(model, exclude=()) -> dict:
    return {
        field: value
        for field, value in model.model_dump(exclude_unset=True, exclude=set(exclude)).items()
        if value is not None
    }


class CatalogService:

    def __init__(self, podcasts: PodcastStore):
        self.podcasts = podcasts

    async def get_all_podcasts(self) -> PodcastsOutput:
        try:
            podcasts = await self.podcasts.find_all()
            return PodcastsOutput(ok=True, podcasts=podcasts)
        except Exception:
            logger.exception("Listing podcasts failed")
            return PodcastsOutput(ok=False, error=INTERNAL_SERVER_ERROR)

    async def create_podcast(self, data: CreatePodcastInput) -> CreatePodcastOutput:
        try:
            podcast = self.podcasts.create(title=data.title, category=data.category, rating=data.rating)
            saved = await self.podcasts.save(podcast)
            logger.info(f"Created podcast id={saved.id} title={data.title}")
            return CreatePodcastOutput(ok=True, id=saved.id)
        except Exception:
            logger.exception(f"Creating podcast {data.title} failed")
            return CreatePodcastOutput(ok=False, error=INTERNAL_SERVER_ERROR)

    async def get_podcast(self, podcast_id: int) -> PodcastOutput:
        """
        Canonical podcast resolver.

        Returns:
            PodcastOutput with ``podcast`` on success, otherwise
            "Podcast with id <id> not found" or the internal error message
        """
        try:
            podcast = await self.podcasts.find_by_id(podcast_id)
            if not podcast:
                raise NotFoundError(f"Podcast with id {podcast_id} not found")
            return PodcastOutput(ok=True, podcast=podcast)
        except NotFoundError as e:
            return PodcastOutput(ok=False, error=e.message)
        except Exception:
            logger.exception(f"Loading podcast {podcast_id} failed")
            return PodcastOutput(ok=False, error=INTERNAL_SERVER_ERROR)

    async def delete_podcast(self, podcast_id: int) -> CoreOutput:
        result = await self.get_podcast(podcast_id)
        if not result.ok:
            return result
        try:
            await self.podcasts.delete(result.podcast)
            logger.info(f"Deleted podcast id={podcast_id}")
            return CoreOutput(ok=True)
        except Exception:
            logger.exception(f"Deleting podcast {podcast_id} failed")
            return CoreOutput(ok=False, error=INTERNAL_SERVER_ERROR)

    async def update_podcast(self, data: UpdatePodcastInput) -> CoreOutput:
        result = await self.get_podcast(data.id)
        if not result.ok:
            return result
        try:
            podcast = result.podcast
            for field, value in _supplied_fields(data.payload).items():
                setattr(podcast, field, value)
            await self.podcasts.save(podcast)
            return CoreOutput(ok=True)
        except Exception:
            logger.exception(f"Updating podcast {data.id} failed")
            return CoreOutput(ok=False, error=INTERNAL_SERVER_ERROR)

    async def get_episodes(self, podcast_id: int) -> EpisodesOutput:
        result = await self.get_podcast(podcast_id)
        if not result.ok:
            return result
        try:
            return EpisodesOutput(ok=True, episodes=list(result.podcast.episodes))
        except Exception:
            logger.exception(f"Loading episodes of podcast {podcast_id} failed")
            return EpisodesOutput(ok=False, error=INTERNAL_SERVER_ERROR)

    async def get_episode(self, data: EpisodesSearchInput) -> EpisodeOutput:
        result = await self.get_episodes(data.podcast_id)
        if not result.ok:
            return result

        episode = next((e for e in result.episodes if e.id == data.episode_id), None)
        if not episode:
            return EpisodeOutput(
                ok=False,
                error=NotFoundError(
                    f"Episode with id {data.episode_id} not found in podcast with id {data.podcast_id}"
                ).message,
            )
        return EpisodeOutput(ok=True, episode=episode)

    async def create_episode(self, data: CreateEpisodeInput) -> CreateEpisodeOutput:
        result = await self.get_podcast(data.podcast_id)
        if not result.ok:
            return result
        try:
            podcast = result.podcast
            episode = Episode(**_supplied_fields(data, exclude=("podcast_id",)))
            podcast.episodes.append(episode)
            await self.podcasts.save(podcast)
            return CreateEpisodeOutput(ok=True, id=episode.id)
        except Exception:
            logger.exception(f"Creating episode in podcast {data.podcast_id} failed")
            return CreateEpisodeOutput(ok=False, error=INTERNAL_SERVER_ERROR)

    async def delete_episode(self, data: EpisodesSearchInput) -> CoreOutput:
        result = await self.get_episode(data)
        if not result.ok:
            return result
        try:
            episode = result.episode
            podcast = episode.podcast
            podcast.episodes.remove(episode)
            await self.podcasts.save(podcast)
            return CoreOutput(ok=True)
        except Exception:
            logger.exception(f"Deleting episode {data.episode_id} of podcast {data.podcast_id} failed")
            return CoreOutput(ok=False, error=INTERNAL_SERVER_ERROR)

    async def update_episode(self, data: UpdateEpisodeInput) -> CoreOutput:
        result = await self.get_episode(
            EpisodesSearchInput(podcast_id=data.podcast_id, episode_id=data.episode_id)
        )
        if not result.ok:
            return result
        try:
            episode = result.episode
            for field, value in _supplied_fields(data, exclude=("podcast_id", "episode_id")).items():
                setattr(episode, field, value)
            await self.podcasts.save(episode.podcast)
            return CoreOutput(ok=True)
        except Exception:
            logger.exception(f"Updating episode {data.episode_id} of podcast {data.podcast_id} failed")
            return CoreOutput(ok=False, error=INTERNAL_SERVER_ERROR)
