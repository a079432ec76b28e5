# -*- coding: utf-8 -*-

from __future__ import annotations

import unittest

from support import ApiTestCase


class TestProfile(ApiTestCase):
    def test_setup_requires_completeness_fields(self) -> None:
        client = self.signed_up()
        resp = client.post("/api/profile/setup", json={"fullName": "No Age", "weight": 70})
        self.assertEqual(resp.status_code, 400)
        self.assertIn("age", resp.json()["errors"])
        self.assertFalse(client.get("/api/auth/me").json()["profileComplete"])

    def test_setup_range_checks(self) -> None:
        client = self.signed_up()
        cases = [
            ({"fullName": "Kid", "age": 12, "weight": 50}, "age"),
            ({"fullName": "Old", "age": 121, "weight": 50}, "age"),
            ({"fullName": "Light", "age": 30, "weight": 29}, "weight"),
            ({"fullName": "Tall", "age": 30, "weight": 70, "height": 301}, "height"),
            ({"fullName": "Units", "age": 30, "weight": 70, "units": "stones"}, "units"),
        ]
        for payload, field in cases:
            with self.subTest(field=field, payload=payload):
                resp = client.post("/api/profile/setup", json=payload)
                self.assertEqual(resp.status_code, 400)
                self.assertIn(field, resp.json()["errors"])

    def test_setup_with_all_fields(self) -> None:
        client = self.signed_up()
        resp = client.post(
            "/api/profile/setup",
            json={
                "fullName": "Frank F",
                "age": 41,
                "gender": "male",
                "height": 180,
                "weight": 82.5,
                "bodyFat": 18,
                "activityLevel": "moderate",
                "goal": "lose_weight",
                "units": "imperial",
                "notifications": False,
            },
        )
        self.assertEqual(resp.status_code, 200, resp.text)
        user = resp.json()
        self.assertTrue(user["profileComplete"])
        self.assertEqual(user["height"], 180)
        self.assertEqual(user["bodyFat"], 18)
        self.assertEqual(user["units"], "imperial")
        self.assertFalse(user["notifications"])

    def test_update_changes_only_supplied_fields(self) -> None:
        client = self.signed_up()
        client.post("/api/profile/setup", json={"fullName": "Gina G", "age": 28, "weight": 60, "goal": "maintain"})

        resp = client.put("/api/profile", json={"weight": 61.5})
        self.assertEqual(resp.status_code, 200, resp.text)
        user = resp.json()
        self.assertEqual(user["weight"], 61.5)
        self.assertEqual(user["age"], 28)
        self.assertEqual(user["goal"], "maintain")
        self.assertEqual(user["units"], "metric")
        self.assertTrue(user["notifications"])

    def test_update_validates_ranges(self) -> None:
        client = self.signed_up()
        resp = client.put("/api/profile", json={"bodyFat": 150})
        self.assertEqual(resp.status_code, 400)
        self.assertIn("bodyFat", resp.json()["errors"])

    def test_profile_requires_session(self) -> None:
        resp = self.new_client().put("/api/profile", json={"weight": 70})
        self.assertEqual(resp.status_code, 401)


if __name__ == "__main__":
    unittest.main()
