"""
Recommendation lifecycle and selection.

Responsibilities:
- Validate submitted YouTube links and store new recommendations.
- Apply up/down votes and drop recommendations that fall below the score floor.
- Serve recommendations by recency, weighted-random pick, or top score.
"""
