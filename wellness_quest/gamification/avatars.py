"""Avatar unlocks and selection"""

from typing import List
import logging

from wellness_quest.exceptions import RecordNotFoundError, ValidationError
from wellness_quest.gamification.catalog import AVATARS
from wellness_quest.gamification.xp_system import level_from_xp
from wellness_quest.models.avatar import AvatarDefinition
from wellness_quest.models.progress import ProgressState

logger = logging.getLogger(__name__)


def unlocked_avatars(level: int) -> List[AvatarDefinition]:
    """Avatars available at ``level``, in catalog order"""
    return [a for a in AVATARS if a.min_level <= level]


def get_avatar(avatar_id: str) -> AvatarDefinition:
    """
    Look up an avatar by id

    Raises:
        RecordNotFoundError: If no avatar has this id
    """
    for avatar in AVATARS:
        if avatar.id == avatar_id:
            return avatar
    raise RecordNotFoundError(
        message=f"Unknown avatar: {avatar_id}",
        record_type="Avatar",
        record_id=avatar_id,
        operation="get_avatar"
    )


def select_avatar(state: ProgressState, avatar_id: str) -> AvatarDefinition:
    """
    Select an avatar the user has unlocked

    Raises:
        RecordNotFoundError: If the avatar does not exist
        ValidationError: If the avatar is still locked at the current level
    """
    avatar = get_avatar(avatar_id)
    level = level_from_xp(state.xp)
    if avatar.min_level > level:
        raise ValidationError(
            message=f"{avatar.name} unlocks at level {avatar.min_level}",
            field="avatar",
            value=avatar_id,
            operation="select_avatar"
        )

    state.selected_avatar_id = avatar.id
    logger.info(f"Selected avatar {avatar.id}")
    return avatar


def current_avatar(state: ProgressState) -> AvatarDefinition:
    """Selected avatar, or the first catalog avatar if the stored id is unknown"""
    for avatar in AVATARS:
        if avatar.id == state.selected_avatar_id:
            return avatar
    logger.warning(f"Stored avatar {state.selected_avatar_id!r} not in catalog, showing default")
    return AVATARS[0]
