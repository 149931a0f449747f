"""
Serializers for dashboard payloads.
"""

from rest_framework import serializers


class TodayCollectionSerializer(serializers.Serializer):
    total = serializers.IntegerField()
    morning = serializers.IntegerField()
    afternoon = serializers.IntegerField()
    posture_percentage = serializers.DecimalField(max_digits=None, decimal_places=2)


class StockStatsSerializer(serializers.Serializer):
    current_stock = serializers.IntegerField()
    today_in = serializers.IntegerField()
    today_out = serializers.IntegerField()


class FinancialStatsSerializer(serializers.Serializer):
    balance = serializers.DecimalField(max_digits=12, decimal_places=2)
    monthly_income = serializers.FloatField()
    monthly_expenses = serializers.FloatField()


class FarmStatsSerializer(serializers.Serializer):
    name = serializers.CharField()
    hen_count = serializers.IntegerField()
    egg_price = serializers.DecimalField(max_digits=10, decimal_places=2)
    subscription_status = serializers.CharField()


class DashboardStatsSerializer(serializers.Serializer):
    """Home screen stats (GET /api/dashboard/stats/)"""
    today_collection = TodayCollectionSerializer()
    stock = StockStatsSerializer()
    financial = FinancialStatsSerializer()
    farm = FarmStatsSerializer()
