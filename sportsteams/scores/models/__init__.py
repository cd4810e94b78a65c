from sportsteams.scores.models.score_model import Score
