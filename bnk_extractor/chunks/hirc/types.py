# bnk_extractor/chunks/hirc/types.py
from enum import IntEnum
from typing import Type, Union

class ObjectType(IntEnum):
    """Kinds of hierarchy objects, stored as a signed byte."""
    SOUND_EFFECT_OR_VOICE = 2
    EVENT_ACTION = 3
    EVENT = 4
    RANDOM_OR_SEQUENCE_CONTAINER = 5
    SWITCH_CONTAINER = 6
    ACTOR_MIXER = 7
    AUDIO_BUS = 8
    BLEND_CONTAINER = 9
    MUSIC_SEGMENT = 10
    MUSIC_TRACK = 11
    MUSIC_SWITCH_CONTAINER = 12
    MUSIC_PLAYLIST_CONTAINER = 13
    ATTENUATION = 14
    DIALOGUE_EVENT = 15
    MOTION_BUS = 16
    MOTION_FX = 17
    EFFECT = 18
    UNKNOWN = 19
    AUXILIARY_BUS = 20

class EventActionScope(IntEnum):
    """What an event action applies to."""
    SWITCH_OR_TRIGGER = 1
    GLOBAL = 2
    GAME_OBJECT = 3
    STATE = 4
    ALL = 5
    ALL_EXCEPT = 6

class EventActionType(IntEnum):
    """Operation performed by an event action."""
    STOP = 1
    PAUSE = 2
    RESUME = 3
    PLAY = 4
    TRIGGER = 5
    MUTE = 6
    UNMUTE = 7
    SET_VOICE_PITCH = 8
    RESET_VOICE_PITCH = 9
    SET_VOICE_VOLUME = 10
    RESET_VOICE_VOLUME = 11
    SET_BUS_VOLUME = 12
    RESET_BUS_VOLUME = 13
    SET_VOICE_LOW_PASS_FILTER = 14
    RESET_VOICE_LOW_PASS_FILTER = 15
    ENABLE_STATE = 16
    DISABLE_STATE = 17
    SET_STATE = 18
    SET_GAME_PARAMETER = 19
    RESET_GAME_PARAMETER = 20
    SET_SWITCH = 21
    TOGGLE_BYPASS = 22
    RESET_BYPASS_EFFECT = 23
    BREAK = 24
    SEEK = 25

class EventActionParameterType(IntEnum):
    """Parameter kinds attached to an event action."""
    DELAY = 0x0E
    PLAY = 0x0F
    PROBABILITY = 0x10

def enum_name(enum_cls: Type[IntEnum], value: int) -> Union[str, None]:
    """Member name for a raw value, or None if the value is not known."""
    try:
        return enum_cls(value).name
    except ValueError:
        return None
