import logging

from django.contrib.auth import get_user_model

logger = logging.getLogger(__name__)

User = get_user_model()


class ProfileService:
    """Plain field updates on the caller's own record. No business rules apply."""

    @staticmethod
    def _update(user_id, **fields):
        updated = User.objects.filter(pk=user_id).update(**fields)
        if not updated:
            raise User.DoesNotExist(f"User {user_id} not found")
        logger.info(f"Profile fields {sorted(fields)} updated for user {user_id}")

    @staticmethod
    def update_profile_info(user_id, name, bio):
        ProfileService._update(user_id, name=name, bio=bio)

    @staticmethod
    def update_social_links(user_id, facebook_link, linkedin_link):
        ProfileService._update(user_id, facebook_link=facebook_link, linkedin_link=linkedin_link)

    @staticmethod
    def update_profile_image(user_id, profile_image_url=None, cover_image_url=None):
        fields = {}
        if profile_image_url is not None:
            fields['profile_image_url'] = profile_image_url
        if cover_image_url is not None:
            fields['cover_image_url'] = cover_image_url
        if not fields:
            raise ValueError('profile_image_url or cover_image_url is required')
        ProfileService._update(user_id, **fields)
