from ..dates import DayDate, Weekday, WeekdayRelation


def preceding_weekday(target_weekday: Weekday | int, base: DayDate) -> DayDate:
    target = Weekday.make(target_weekday)
    base_dow = base.weekday
    if base_dow > target:
        adjust = min(0, target - base_dow)
    else:
        adjust = -7 + max(0, target - base_dow)
    return base.add_days(adjust)

def following_weekday(target_weekday: Weekday | int, base: DayDate) -> DayDate:
    target = Weekday.make(target_weekday)
    base_dow = base.weekday
    if base_dow >= target:
        adjust = 7 + min(0, target - base_dow)
    else:
        adjust = max(0, target - base_dow)
    return base.add_days(adjust)

def nearest_weekday(target_weekday: Weekday | int, base: DayDate) -> DayDate:
    '''
    The occurrence of target_weekday within three days of base, base itself included.
    '''
    target = Weekday.make(target_weekday)
    adjust = (target - base.weekday) % 7
    if adjust >= 4:
        adjust -= 7
    return base.add_days(adjust)

_relation_router = {
    WeekdayRelation.PRECEDING: preceding_weekday,
    WeekdayRelation.NEAREST: nearest_weekday,
    WeekdayRelation.FOLLOWING: following_weekday,
}

def relative_weekday(target_weekday: Weekday | int, base: DayDate, relation: WeekdayRelation) -> DayDate:
    try:
        method = _relation_router[relation]
    except KeyError:
        raise NotImplementedError(f'Weekday relation {relation} has no implemented method.') from None
    return method(target_weekday, base)
