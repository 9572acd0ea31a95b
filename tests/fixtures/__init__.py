"""
Test Fixtures - Shared Sample Data.

data/people.in, data/meetings.in:
    Three-person chain (Alice -> Bob -> Carol) with known probabilities.
data/people_unsorted.in, data/meetings_chain.in:
    Six people listed out of identifier order with a four-meeting chain.
"""
