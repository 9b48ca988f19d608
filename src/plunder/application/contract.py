CONTRACT_VERSION = "1.0.0"

COMMAND_INTENTS = (
    "new_session",
    "choose_location_intent",
    "resolve_item_choice_intent",
)

QUERY_INTENTS = (
    "get_player_view",
    "get_level_view",
    "list_item_options",
    "battle_view_intent",
    "get_session_summary",
)

CONTRACT_DTO_TYPES = (
    "ActionResult",
    "PlayerTurn",
    "PlayerView",
    "LevelView",
    "BattleView",
    "SessionSummaryView",
)
