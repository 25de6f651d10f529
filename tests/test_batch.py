"""Unit tests for point and batch helpers."""

import json
import unittest

from influxtemplate.batch import BatchPoints, ConsistencyLevel, make_point


class TestMakePoint(unittest.TestCase):
    """Point dicts must match the shape InfluxDBClient.write_points expects."""

    def test_minimal_point(self):
        point = make_point("cpu", {"value": 42})
        self.assertEqual(point, {"measurement": "cpu", "fields": {"value": 42}})

    def test_tags_and_time_included_when_present(self):
        point = make_point("cpu", {"value": 0.5}, tags={"host": "a"}, time=1234567890)
        self.assertEqual(point["tags"], {"host": "a"})
        self.assertEqual(point["time"], 1234567890)
        # Should be JSON serializable without errors
        self.assertEqual(json.loads(json.dumps(point)), point)

    def test_empty_tags_omitted(self):
        point = make_point("cpu", {"value": 1}, tags={})
        self.assertNotIn("tags", point)
        self.assertNotIn("time", point)

    def test_empty_measurement_rejected(self):
        with self.assertRaises(ValueError):
            make_point("", {"value": 1})

    def test_empty_fields_rejected(self):
        with self.assertRaises(ValueError):
            make_point("cpu", {})


class TestBatchPoints(unittest.TestCase):
    """Batches keep points in insertion order with their write settings."""

    def test_defaults_to_consistency_all(self):
        batch = BatchPoints("metrics", retention_policy="autogen")
        self.assertEqual(batch.consistency, ConsistencyLevel.ALL)
        self.assertEqual(batch.consistency.value, "all")
        self.assertEqual(len(batch), 0)

    def test_points_keep_insertion_order(self):
        batch = BatchPoints("metrics")
        first = make_point("a", {"v": 1})
        second = make_point("b", {"v": 2})
        batch.point(first).point(second)
        self.assertEqual(batch.points, [first, second])
        self.assertEqual(list(batch), [first, second])

    def test_points_returns_copy(self):
        batch = BatchPoints("metrics")
        batch.points.append(make_point("a", {"v": 1}))
        self.assertEqual(len(batch), 0)

    def test_consistency_accepts_string(self):
        batch = BatchPoints("metrics", consistency="quorum")
        self.assertEqual(batch.consistency, ConsistencyLevel.QUORUM)

    def test_database_required(self):
        with self.assertRaises(ValueError):
            BatchPoints("")


if __name__ == "__main__":
    unittest.main()
