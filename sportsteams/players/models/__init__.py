from sportsteams.players.models.player_model import Player
