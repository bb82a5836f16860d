"""Logical sound triggers. Each name doubles as its folder name and settings key."""

SOUND_START = "start"
SOUND_SESSION_CREATED = "session-created"
SOUND_PROMPT_SUBMIT = "prompt-submit"
SOUND_NOTIFICATION = "notification"
SOUND_PERMISSION = "permission"
SOUND_STOP = "stop"

SOUND_EVENTS = (
    SOUND_START,
    SOUND_SESSION_CREATED,
    SOUND_PROMPT_SUBMIT,
    SOUND_NOTIFICATION,
    SOUND_PERMISSION,
    SOUND_STOP,
)
