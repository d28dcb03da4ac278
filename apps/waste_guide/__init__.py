"""Waste Guide Service.

HSY 폐기물 가이드 카탈로그 동기화 및 물품 매칭.
"""
