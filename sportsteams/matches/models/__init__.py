from sportsteams.matches.models.match_model import Match
