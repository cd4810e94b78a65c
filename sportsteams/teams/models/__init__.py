from sportsteams.teams.models.team_model import Team
