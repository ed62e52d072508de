"""Team statistics engine.

Sub-modules:
- team_stats – per-team averages, factor scores, agreement classification
- profile    – per-participant feedback card projection
"""
