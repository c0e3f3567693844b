"""
Recommendation engine: maps an athlete's metric snapshot onto the sport
catalogue and returns ranked, explained matches.

Modules
-------
extraction  : extract_metric_value() + EXTRACTION_RULES — resolves one number
              per metric from raw stored values; never raises.
scorer      : CriterionMatch / ScoredSport + compute_match_score() +
              score_sport() + build_reason() — pure functions, no I/O.
sufficiency : DataInsufficientError + check_data_sufficiency() +
              assert_data_sufficient() — the gate run before ranking.
ranker      : rank_sports() + score_athlete() — top-N selection.
explainer   : explain() + score_band() + describe_top_metrics() — text.
reporter    : write_recommendation_csv() + write_recommendation_json().
"""
