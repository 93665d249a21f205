import math

from typedrill.config import SPEED_OF_LIGHT, WPM_PER_1SEC_TRIGRAM_TIME, WPM_IN_CPS


def time_to_wpm(trigram_time):
    return WPM_PER_1SEC_TRIGRAM_TIME / trigram_time


def calc_wpm(chars, seconds):
    return chars / seconds * WPM_IN_CPS


def effort_score(trigram_time):
    # 1 for a standstill, falling to 0 at SPEED_OF_LIGHT
    if trigram_time <= 0:
        return 0.0
    q = time_to_wpm(trigram_time) / SPEED_OF_LIGHT
    q = q * q
    if q > 1.0:
        return 0.0
    return math.sqrt(1.0 - q)


def trigram_score(stat, default_duration):
    """Approximates time that will be spent typing the trigram.

    Frequency of the trigram multiplied by how hard it currently is to type,
    so both rare and easy trigrams rank low.
    """
    duration = stat.duration.average(default_duration)
    return stat.count * effort_score(duration)
