from sportsteams.leagues.models.leagues_models import League
