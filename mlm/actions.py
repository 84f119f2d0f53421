"""
Commands accepted by the action endpoint.

Each command pairs the serializer that validates its ``data`` payload with
the handler that performs it. Handlers return the success message.
"""
from dataclasses import dataclass
from typing import Callable

from users.serializers import ProfileImageSerializer, ProfileInfoSerializer, SocialLinksSerializer
from users.services import ProfileService

from .exceptions import UnknownAction
from .serializers import ActivateAccountSerializer, UpgradeLevelSerializer
from .services import LevelService


@dataclass(frozen=True)
class Command:
    name: str
    serializer_class: type
    handler: Callable


def activate_account(user, data):
    return LevelService.activate(user.pk, data['level'])


def upgrade_user_level(user, data):
    return LevelService.upgrade(user.pk, data['targetLevel'])


def update_profile_info(user, data):
    ProfileService.update_profile_info(user.pk, name=data['name'], bio=data['bio'])
    return "Profile information updated."


def update_social_links(user, data):
    ProfileService.update_social_links(
        user.pk, facebook_link=data['facebookLink'], linkedin_link=data['linkedInLink']
    )
    return "Social links updated."


def update_profile_image(user, data):
    ProfileService.update_profile_image(
        user.pk,
        profile_image_url=data.get('profileImageUrl'),
        cover_image_url=data.get('coverImageUrl'),
    )
    return "Image updated successfully."


COMMANDS = {
    command.name: command
    for command in (
        Command('ACTIVATE_ACCOUNT', ActivateAccountSerializer, activate_account),
        Command('UPGRADE_USER_LEVEL', UpgradeLevelSerializer, upgrade_user_level),
        Command('UPDATE_PROFILE_INFO', ProfileInfoSerializer, update_profile_info),
        Command('UPDATE_SOCIAL_LINKS', SocialLinksSerializer, update_social_links),
        Command('UPDATE_PROFILE_IMAGE', ProfileImageSerializer, update_profile_image),
    )
}


def dispatch(user, action, payload):
    """Validate ``payload`` against the command's schema and run it. Returns the success message."""
    command = COMMANDS.get(action)
    if command is None:
        raise UnknownAction("Invalid action specified.")

    serializer = command.serializer_class(data=payload or {})
    serializer.is_valid(raise_exception=True)
    return command.handler(user, serializer.validated_data)
