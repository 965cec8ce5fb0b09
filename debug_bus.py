import sys, os
ROOT=os.path.dirname(__file__); SRC=os.path.join(ROOT,'src');
if SRC not in sys.path: sys.path.insert(0,SRC)
import random
from quadtiles.components.direction import Direction
from quadtiles.components.level import Level
from quadtiles.engine import GridEngine
from quadtiles.events.bus import (EventBus, EVENT_TILES_MOVED, EVENT_TILES_SPAWNED, EVENT_OBSTACLE_SKIPPED,
                                  EVENT_SESSION_MODE_CHANGED, EVENT_SESSION_WON, EVENT_SESSION_LOST)

seed = int(sys.argv[1]) if len(sys.argv) > 1 else 0
bus=EventBus()
for name in (EVENT_TILES_SPAWNED, EVENT_OBSTACLE_SKIPPED, EVENT_SESSION_MODE_CHANGED, EVENT_SESSION_WON, EVENT_SESSION_LOST):
    bus.subscribe(name, lambda sender, _name=name, **payload: print(_name, payload))
bus.subscribe(EVENT_TILES_MOVED, lambda sender, **payload: print('moved', payload['direction'].name,
              [(d.number, d.source, d.target) for d in payload['displacements']]))

rng=random.Random(seed)
engine=GridEngine(Level(dimension=4, positions=((1,1),(9,9))), event_bus=bus, rng=rng)
engine.setup()
for _ in range(200):
    engine.step(0.25, rng.choice(list(Direction)))
    if engine.win_anchor is not None or engine.mode.terminal:
        break
print('final', engine.mode.name, 'remaining', round(engine.remaining_time, 2), 'tiles', engine.tiles())
