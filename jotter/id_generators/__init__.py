from jotter.id_generators.base import IdGenerator
from jotter.id_generators.sequential import SequentialIdGenerator
from jotter.id_generators.timestamp import TimestampIdGenerator, now_millis

__all__ = ["IdGenerator", "SequentialIdGenerator", "TimestampIdGenerator", "now_millis"]
