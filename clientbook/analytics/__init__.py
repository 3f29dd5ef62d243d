"""
clientbook.analytics — Scoring, ranking, explanation and cohort statistics.

Import surface::

    from clientbook.analytics.scoring     import score_client
    from clientbook.analytics.ranking     import rank_client, CohortRankIndex
    from clientbook.analytics.explanation import explain_priority
    from clientbook.analytics.statistics  import calculate_statistics
    from clientbook.analytics.cohort      import prioritise_cohort
"""
