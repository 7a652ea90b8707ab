import logging
from queue import Queue

from streamreducer.core import ReducerWorkerThread, StreamingReducer, Point


def drain(q):
    items = []
    while not q.empty():
        items.append(q.get())
    return items


def test_worker_feeds_reducer(caplog):
    tasks = Queue()
    results = Queue()
    reducer = StreamingReducer(capacity=5, allowedError=2.0)
    worker = ReducerWorkerThread('test', reducer, tasks, results)
    worker.start()

    tasks.put((0, 0))
    tasks.put(Point(0, 1))
    with caplog.at_level(logging.ERROR, logger='streamreducer.worker.reducer.test'):
        tasks.put('bad')
        for s in [(10, 2), (0, 3), (0, 4), (0, 5), (0, 6)]:
            tasks.put(s)
        tasks.put(None)
        worker.join(5)

    assert not worker.is_alive()
    assert 'cannot add' in caplog.text
    retained = drain(results)
    assert [p.asTuple() for p in retained] == [(0., 0.), (10., 2.), (0., 3.)]
    assert list(reducer.retainedPoints) == retained
