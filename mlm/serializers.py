from rest_framework import serializers

from .rules import DISTRIBUTION_RULES, LEVEL_COSTS, MAX_LEVEL, MIN_LEVEL


class ActivateAccountSerializer(serializers.Serializer):
    level = serializers.IntegerField(
        min_value=MIN_LEVEL, max_value=MAX_LEVEL,
        error_messages={
            'required': 'A valid level (1-10) must be provided.',
            'null': 'A valid level (1-10) must be provided.',
            'invalid': 'A valid level (1-10) must be provided.',
            'min_value': 'A valid level (1-10) must be provided.',
            'max_value': 'A valid level (1-10) must be provided.',
        }
    )


class UpgradeLevelSerializer(serializers.Serializer):
    targetLevel = serializers.IntegerField(
        min_value=MIN_LEVEL + 1, max_value=MAX_LEVEL,
        error_messages={
            'required': 'Invalid target level provided.',
            'null': 'Invalid target level provided.',
            'invalid': 'Invalid target level provided.',
            'min_value': 'Invalid target level provided.',
            'max_value': 'Invalid target level provided.',
        }
    )


class LevelInfoSerializer(serializers.Serializer):
    level = serializers.IntegerField()
    cost = serializers.DecimalField(max_digits=20, decimal_places=2)
    adminShare = serializers.DecimalField(max_digits=20, decimal_places=2, source='admin_share')
    uplineShares = serializers.ListField(
        child=serializers.DecimalField(max_digits=20, decimal_places=2), source='upline_shares'
    )

    @staticmethod
    def rows():
        return [
            {
                'level': level,
                'cost': LEVEL_COSTS[level],
                'admin_share': rule.admin_share,
                'upline_shares': list(rule.upline_shares),
            }
            for level, rule in sorted(DISTRIBUTION_RULES.items())
        ]
