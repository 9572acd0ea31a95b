"""
Performance Tests.

Timing checks for the detection engine:
    - 20000 people sorted twice < 10 seconds
    - 5000 people and 20000 meetings end to end < 15 seconds
"""
