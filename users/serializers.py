from rest_framework import serializers
from django.contrib.auth import get_user_model

User = get_user_model()


def _messages(field):
    return {
        'required': f'{field} is required.',
        'null': f'{field} may not be null.',
        'invalid': f'{field} must be a string.',
        'max_length': f'{field} is too long.',
    }


class UserSerializer(serializers.ModelSerializer):
    accountLevel = serializers.IntegerField(source='account_level', read_only=True)
    referrerId = serializers.IntegerField(source='referrer_id', read_only=True)
    facebookLink = serializers.CharField(source='facebook_link', read_only=True)
    linkedInLink = serializers.CharField(source='linkedin_link', read_only=True)
    profileImageUrl = serializers.CharField(source='profile_image_url', read_only=True)
    coverImageUrl = serializers.CharField(source='cover_image_url', read_only=True)

    class Meta:
        model = User
        fields = ('id', 'email', 'username', 'name', 'bio', 'coins', 'status',
                  'accountLevel', 'referrerId', 'facebookLink', 'linkedInLink',
                  'profileImageUrl', 'coverImageUrl', 'date_joined')
        read_only_fields = fields


class ProfileInfoSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=150, allow_blank=True, error_messages=_messages('name'))
    bio = serializers.CharField(allow_blank=True, error_messages=_messages('bio'))


class SocialLinksSerializer(serializers.Serializer):
    facebookLink = serializers.CharField(max_length=255, allow_blank=True, error_messages=_messages('facebookLink'))
    linkedInLink = serializers.CharField(max_length=255, allow_blank=True, error_messages=_messages('linkedInLink'))


class ProfileImageSerializer(serializers.Serializer):
    profileImageUrl = serializers.CharField(max_length=500, required=False, error_messages=_messages('profileImageUrl'))
    coverImageUrl = serializers.CharField(max_length=500, required=False, error_messages=_messages('coverImageUrl'))

    def validate(self, data):
        if not data.get('profileImageUrl') and not data.get('coverImageUrl'):
            raise serializers.ValidationError('profileImageUrl or coverImageUrl is required.')
        return data
