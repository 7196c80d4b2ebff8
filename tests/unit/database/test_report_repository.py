"""
Tests for report and moderation action persistence.
"""

import unittest

from sqlalchemy.orm import sessionmaker

from database.repositories import ReportRepository, SqlProviderRepository
from tests import create_test_engine
from tests.fixtures.providers import make_provider


class ReportRepositoryTestCase(unittest.TestCase):

    def setUp(self):
        self.engine = create_test_engine()
        self.db = sessionmaker(bind=self.engine)()
        providers = SqlProviderRepository(self.db)
        providers.create(make_provider("p1"))
        providers.create(make_provider("p2"))
        self.db.commit()
        self.repo = ReportRepository(self.db)

    def tearDown(self):
        self.db.close()
        self.engine.dispose()


class TestReports(ReportRepositoryTestCase):

    def test_create_report_defaults(self):
        report = self.repo.create_report("p1", "discrimination", "Refused service to me", "anon-1")
        self.assertIsNotNone(report.id)
        self.assertEqual(report.status, "pending")
        self.assertIsNotNone(report.created_at)
        self.assertIsNone(report.resolved_at)
        self.assertEqual(self.repo.get_report(report.id).reporter_session_id, "anon-1")

    def test_list_reports_by_status(self):
        first = self.repo.create_report("p1", "harassment", "Inappropriate comments", "s1")
        self.repo.create_report("p2", "other", "Something else happened", "s2")
        self.repo.update_report_status(first.id, "reviewing")

        self.assertEqual(len(self.repo.list_reports()), 2)
        self.assertEqual([r.id for r in self.repo.list_reports("reviewing")], [first.id])
        self.assertEqual(len(self.repo.list_reports_for_provider("p2")), 1)

    def test_update_with_resolution_sets_resolved_at(self):
        report = self.repo.create_report("p1", "false-credentials", "License number invalid", "s1")
        updated = self.repo.update_report_status(report.id, "resolved", moderator_notes="Checked", resolution="Badge removed")
        self.assertEqual(updated.status, "resolved")
        self.assertEqual(updated.moderator_notes, "Checked")
        self.assertEqual(updated.resolution, "Badge removed")
        self.assertIsNotNone(updated.resolved_at)

    def test_update_missing_returns_none(self):
        self.assertIsNone(self.repo.update_report_status("nope", "dismissed"))

    def test_open_report_count(self):
        a = self.repo.create_report("p1", "harassment", "Inappropriate comments", "s1")
        self.repo.create_report("p1", "other", "Another concern here", "s2")
        self.repo.update_report_status(a.id, "dismissed")
        self.assertEqual(self.repo.count_open_reports("p1"), 1)
        self.assertEqual(self.repo.count_open_reports("p2"), 0)

    def test_stats(self):
        a = self.repo.create_report("p1", "harassment", "Inappropriate comments", "s1")
        self.repo.create_report("p2", "harassment", "Inappropriate comments", "s2")
        self.repo.create_report("p2", "other", "Another concern here", "s3")
        self.repo.update_report_status(a.id, "resolved", resolution="Warned")

        stats = self.repo.get_report_stats()
        self.assertEqual(stats["total"], 3)
        self.assertEqual(stats["pending"], 2)
        self.assertEqual(stats["resolved"], 1)
        self.assertEqual(stats["dismissed"], 0)
        self.assertEqual(stats["by_reason"], {"harassment": 2, "other": 1})


class TestModerationActions(ReportRepositoryTestCase):

    def test_create_and_list_actions(self):
        report = self.repo.create_report("p1", "harassment", "Inappropriate comments", "s1")
        action = self.repo.create_action("p1", "suspend", "Repeated harassment", "mod-1", report_id=report.id)
        self.repo.create_action("p2", "warning", "First notice", "mod-2")

        self.assertEqual(action.report_id, report.id)
        self.assertIsNotNone(action.performed_at)
        self.assertEqual(len(self.repo.list_actions()), 2)
        self.assertEqual([a.action for a in self.repo.list_actions("p1")], ["suspend"])


if __name__ == "__main__":
    unittest.main()
