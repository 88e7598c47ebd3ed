"""Recommendation engine — bucket-list and heuristic travel recommendations.

Modules:
    config              Confidence weights, limits, and heuristic templates
    matching            Either-direction text matching helpers
    question_generator  Follow-up questions for vague or missing input
    answer_integrator   Merges follow-up answers back into travel input
    catalog_matcher     Scores bucket-list destinations
    experience_matcher  Cross-pollinates individual bucket-list experiences
    heuristics          Keyword-bucket template recommendations
    engine              Runs the pipeline and ranks the results

Pipeline:
    InputAnalyzer.normalize → CatalogMatcher + ExperienceMatcher
    + HeuristicRecommender → rank by confidence → cap
"""
