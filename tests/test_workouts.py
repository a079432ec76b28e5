# -*- coding: utf-8 -*-

from __future__ import annotations

import unittest

from support import ApiTestCase


class WorkoutTestCase(ApiTestCase):
    def add_program(self, client, name: str = "Push Pull Legs", **extra) -> dict:
        payload = {"name": name, "frequency": 3, "level": "intermediate"}
        payload.update(extra)
        resp = client.post("/api/workout-programs", json=payload)
        self.assertEqual(resp.status_code, 201, resp.text)
        return resp.json()

    def add_day(self, client, program_id: int, name: str, **extra) -> dict:
        resp = client.post(f"/api/workout-programs/{program_id}/days", json={"name": name, **extra})
        self.assertEqual(resp.status_code, 201, resp.text)
        return resp.json()

    def add_exercise(self, client, name: str = "Goblet Squat", muscle_group: str = "legs") -> dict:
        resp = client.post("/api/exercises", json={"name": name, "muscleGroup": muscle_group})
        self.assertEqual(resp.status_code, 201, resp.text)
        return resp.json()


class TestExercises(WorkoutTestCase):
    def test_custom_exercise_visible_only_to_owner(self) -> None:
        owner = self.signed_up()
        exercise = self.add_exercise(owner, name="Zercher Squat")
        self.assertTrue(exercise["isCustom"])

        resp = owner.get(f"/api/exercises/{exercise['id']}")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["name"], "Zercher Squat")

        other = self.signed_up()
        resp = other.get(f"/api/exercises/{exercise['id']}")
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json()["message"], "Exercise not found")
        self.assertNotIn("Zercher Squat", [e["name"] for e in other.get("/api/exercises").json()])

    def test_filter_by_muscle_group(self) -> None:
        client = self.signed_up()
        self.add_exercise(client, name="Cable Fly", muscle_group="chest")
        self.add_exercise(client, name="Leg Curl", muscle_group="legs")
        names = [e["name"] for e in client.get("/api/exercises", params={"muscleGroup": "chest"}).json()]
        self.assertIn("Cable Fly", names)
        self.assertNotIn("Leg Curl", names)

    def test_exercises_require_session(self) -> None:
        self.assertEqual(self.new_client().get("/api/exercises").status_code, 401)


class TestPrograms(WorkoutTestCase):
    def test_single_active_program(self) -> None:
        client = self.signed_up()
        first = self.add_program(client, name="Strength", active=True)
        second = self.add_program(client, name="Hypertrophy", active=True)

        programs = {p["id"]: p for p in client.get("/api/workout-programs").json()}
        self.assertFalse(programs[first["id"]]["active"])
        self.assertTrue(programs[second["id"]]["active"])

        resp = client.post(f"/api/workout-programs/{first['id']}/activate")
        self.assertEqual(resp.status_code, 200)
        self.assertTrue(resp.json()["active"])

        programs = {p["id"]: p for p in client.get("/api/workout-programs").json()}
        self.assertEqual([pid for pid, p in programs.items() if p["active"]], [first["id"]])

    def test_inactive_program_leaves_active_one_alone(self) -> None:
        client = self.signed_up()
        active = self.add_program(client, name="Current", active=True)
        self.add_program(client, name="Draft")
        resp = client.get(f"/api/workout-programs/{active['id']}")
        self.assertEqual(resp.status_code, 200)
        self.assertTrue(resp.json()["active"])

    def test_days_are_ordered_and_appended(self) -> None:
        client = self.signed_up()
        program = self.add_program(client)
        push = self.add_day(client, program["id"], "Push", dayOfWeek=1)
        pull = self.add_day(client, program["id"], "Pull", dayOfWeek=3)
        self.assertEqual((push["order"], pull["order"]), (0, 1))
        self.add_day(client, program["id"], "Warmup", order=0)

        resp = client.get(f"/api/workout-programs/{program['id']}/days")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual([d["name"] for d in resp.json()], ["Push", "Warmup", "Pull"])

    def test_day_validation(self) -> None:
        client = self.signed_up()
        program = self.add_program(client)
        resp = client.post(f"/api/workout-programs/{program['id']}/days", json={"name": "Bad", "dayOfWeek": 7})
        self.assertEqual(resp.status_code, 400)
        self.assertIn("dayOfWeek", resp.json()["errors"])

    def test_other_users_program_is_not_found(self) -> None:
        owner = self.signed_up()
        program = self.add_program(owner)
        day = self.add_day(owner, program["id"], "Legs")
        exercise = self.add_exercise(owner)

        other = self.signed_up()
        resp = other.get(f"/api/workout-programs/{program['id']}/days")
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json(), {"message": "Workout program not found"})
        self.assertEqual(other.get(f"/api/workout-programs/{program['id']}").status_code, 404)
        self.assertEqual(other.post(f"/api/workout-programs/{program['id']}/activate").status_code, 404)
        resp = other.post(f"/api/workout-programs/{program['id']}/days", json={"name": "Hijack"})
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(other.get(f"/api/workout-days/{day['id']}/exercises").status_code, 404)
        resp = other.post(f"/api/workout-days/{day['id']}/exercises", json={"exerciseId": exercise["id"]})
        self.assertEqual(resp.status_code, 404)

        # Missing rows look exactly the same.
        self.assertEqual(other.get("/api/workout-programs/999999/days").json(), {"message": "Workout program not found"})

    def test_day_exercises_join_exercise_details(self) -> None:
        client = self.signed_up()
        program = self.add_program(client)
        day = self.add_day(client, program["id"], "Legs")
        squat = self.add_exercise(client, name="Front Squat")
        lunge = self.add_exercise(client, name="Reverse Lunge")

        resp = client.post(
            f"/api/workout-days/{day['id']}/exercises",
            json={"exerciseId": squat["id"], "sets": 4, "reps": "6-8", "weight": "80kg", "restTime": 120},
        )
        self.assertEqual(resp.status_code, 201, resp.text)
        row = resp.json()
        self.assertEqual(row["exerciseName"], "Front Squat")
        self.assertEqual(row["muscleGroup"], "legs")
        self.assertEqual(row["order"], 0)
        client.post(f"/api/workout-days/{day['id']}/exercises", json={"exerciseId": lunge["id"], "sets": 3})

        rows = client.get(f"/api/workout-days/{day['id']}/exercises").json()
        self.assertEqual([r["exerciseName"] for r in rows], ["Front Squat", "Reverse Lunge"])

        resp = client.post(f"/api/workout-days/{day['id']}/exercises", json={"exerciseId": 999999})
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json()["message"], "Exercise not found")


class TestSessions(WorkoutTestCase):
    def test_log_session_and_sets(self) -> None:
        client = self.signed_up()
        program = self.add_program(client, name="Full Body")
        day = self.add_day(client, program["id"], "Day A")
        exercise = self.add_exercise(client, name="Bench")

        resp = client.post(
            "/api/workout-sessions",
            json={"programId": program["id"], "dayId": day["id"], "date": "2024-05-02", "duration": 45},
        )
        self.assertEqual(resp.status_code, 201, resp.text)
        session = resp.json()
        self.assertEqual(session["date"], "2024-05-02")
        self.assertFalse(session["complete"])

        resp = client.post(
            f"/api/workout-sessions/{session['id']}/sets",
            json={"exerciseId": exercise["id"], "setNumber": 1, "reps": 8, "weight": 60, "complete": True},
        )
        self.assertEqual(resp.status_code, 201, resp.text)
        logged = resp.json()
        self.assertEqual(logged["sessionId"], session["id"])
        self.assertTrue(logged["complete"])

        resp = client.post(
            f"/api/workout-sessions/{session['id']}/sets",
            json={"exerciseId": exercise["id"], "setNumber": 0, "reps": 8, "weight": 60},
        )
        self.assertEqual(resp.status_code, 400)
        self.assertIn("setNumber", resp.json()["errors"])

    def test_recent_sessions_newest_first(self) -> None:
        client = self.signed_up()
        program = self.add_program(client, name="Running Base")
        day = self.add_day(client, program["id"], "Tempo")
        for date in ("2024-03-01", "2024-03-10", "2024-03-05"):
            client.post("/api/workout-sessions", json={"programId": program["id"], "dayId": day["id"], "date": date})
        for i in range(10):
            client.post("/api/workout-sessions", json={"date": f"2024-01-{i + 1:02d}"})

        resp = client.get("/api/workout-sessions/recent")
        self.assertEqual(resp.status_code, 200)
        recent = resp.json()
        self.assertEqual(len(recent), 10)
        self.assertEqual([r["date"] for r in recent[:3]], ["2024-03-10", "2024-03-05", "2024-03-01"])
        self.assertEqual(recent[0]["programName"], "Running Base")
        self.assertEqual(recent[0]["dayName"], "Tempo")
        self.assertIsNone(recent[3]["programName"])

    def test_session_references_must_be_owned(self) -> None:
        owner = self.signed_up()
        program = self.add_program(owner)
        day = self.add_day(owner, program["id"], "A")

        other = self.signed_up()
        resp = other.post("/api/workout-sessions", json={"programId": program["id"], "date": "2024-05-02"})
        self.assertEqual(resp.status_code, 404)
        resp = other.post("/api/workout-sessions", json={"dayId": day["id"], "date": "2024-05-02"})
        self.assertEqual(resp.status_code, 404)

        own = self.add_program(owner, name="Second")
        resp = owner.post(
            "/api/workout-sessions",
            json={"programId": own["id"], "dayId": day["id"], "date": "2024-05-02"},
        )
        self.assertEqual(resp.status_code, 400)
        self.assertIn("dayId", resp.json()["errors"])

    def test_sets_on_foreign_session_are_rejected(self) -> None:
        owner = self.signed_up()
        session = owner.post("/api/workout-sessions", json={"date": "2024-05-02"}).json()
        exercise = self.add_exercise(owner)

        other = self.signed_up()
        resp = other.post(
            f"/api/workout-sessions/{session['id']}/sets",
            json={"exerciseId": exercise["id"], "setNumber": 1, "reps": 5, "weight": 100},
        )
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json()["message"], "Workout session not found")


if __name__ == "__main__":
    unittest.main()
