import pendulum

from daylog.time import Clock


def fixed_clock(
    year: int, month: int, day: int, hour: int = 12, minute: int = 0
) -> Clock:
    moment = pendulum.datetime(year, month, day, hour, minute, tz="local")
    return lambda: moment
