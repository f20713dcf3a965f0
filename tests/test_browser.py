"""
Tests for Browser - resource table view, key handling and refresh.
"""
import copy
import unittest
from unittest.mock import Mock, patch

from resource_browser.BrowserConfig import DEFAULT_CONFIG
from resource_browser.dao import DeploymentAccessor, Gvr, KubeClient
from resource_browser.errors import ApiError, DeadlineExceeded
from resource_browser.ui.KeyActions import KEY_SPACE, KEY_Z, KeyAction
from resource_browser.view import App, Browser

HEADER = ["NAMESPACE", "NAME", "PAUSED"]
ROWS = [("ns/a", ["ns", "a", "false"]), ("ns/b", ["ns", "b", "true"])]


class TestBrowser(unittest.TestCase):

    def setUp(self):
        self.config = copy.deepcopy(DEFAULT_CONFIG)
        self.app = App(self.config, Mock(spec=KubeClient))
        self.browser = Browser(self.app, Gvr.parse("apps/v1/deployments"), "ns")

        patcher = patch('resource_browser.view.Browser.accessor_for')
        self.accessor_for = patcher.start()
        self.addCleanup(patcher.stop)
        self.accessor = Mock(spec=DeploymentAccessor)
        self.accessor.header.return_value = HEADER
        self.accessor.list.return_value = ROWS
        self.accessor_for.return_value = self.accessor

    def test_init_binds_mark_and_starts(self):
        self.browser.init()

        self.assertTrue(self.browser.state.is_running())
        self.assertEqual(self.browser.actions.hints(), [(KEY_SPACE, "Mark")])

    def test_bind_keys_fns_run_on_refresh_actions(self):
        handler = Mock()
        self.browser.add_bind_keys_fn(lambda aa: aa.add(KEY_Z, KeyAction("Z", handler)))

        self.browser.refresh_actions()
        self.browser.refresh_actions()

        self.assertIn(KEY_Z, self.browser.actions)
        self.assertEqual(len(self.browser.actions), 2)

    def test_refresh_loads_rows(self):
        self.browser.init()

        self.browser.refresh()

        self.assertEqual(self.browser.table.header, HEADER)
        self.assertEqual([path for path, _ in self.browser.table.rows], ["ns/a", "ns/b"])
        ctx, namespace = self.accessor.list.call_args[0]
        self.assertEqual(namespace, "ns")
        self.assertTrue(ctx.cancelled)

    def test_refresh_skipped_while_suspended(self):
        self.browser.init()
        self.browser.stop()

        self.browser.refresh()

        self.accessor.list.assert_not_called()

    def test_refresh_error_goes_to_flash(self):
        self.accessor.list.side_effect = ApiError("forbidden", status=403)
        self.browser.init()

        self.browser.refresh()

        self.assertEqual(self.app.flash().message, "forbidden")
        self.assertEqual(self.browser.table.rows, [])

    def test_refresh_timeout_goes_to_flash(self):
        self.accessor.list.side_effect = DeadlineExceeded("context deadline exceeded")
        self.browser.init()

        self.browser.refresh()

        self.assertEqual(self.app.flash().message, "context deadline exceeded")

    def test_space_marks_cursor_row(self):
        self.browser.init()
        self.browser.refresh()

        result = self.browser.handle_key(KEY_SPACE, "evt")

        self.assertIsNone(result)
        self.assertTrue(self.browser.table.is_marked("ns/a"))

    def test_keys_ignored_while_suspended(self):
        self.browser.init()
        self.browser.refresh()
        self.browser.stop()

        result = self.browser.handle_key(KEY_SPACE, "evt")

        self.assertEqual(result, "evt")
        self.assertFalse(self.browser.table.is_marked("ns/a"))

    def test_stop_only_suspends_running_viewer(self):
        self.browser.stop()
        self.assertEqual(self.browser.state.get_state(), 'starting')

    def test_start_after_shutdown_is_noop(self):
        self.browser.init()
        self.browser.shutdown()

        self.browser.start()

        self.assertEqual(self.browser.state.get_state(), 'shutdown')

    def test_dangerous_key_blocked_on_read_only_host(self):
        self.config['browser']['read_only'] = True
        handler = Mock()
        self.browser.add_bind_keys_fn(lambda aa: aa.add(KEY_Z, KeyAction("Z", handler, dangerous=True)))
        self.browser.init()

        self.browser.handle_key(KEY_Z, "evt")

        handler.assert_not_called()


class TestBrowserWithDeploymentAccessor(unittest.TestCase):

    def test_refresh_accepts_fractional_second_timestamps(self):
        factory = Mock(spec=KubeClient)
        factory.get.return_value = {"items": [{
            "metadata": {
                "namespace": "ns",
                "name": "a",
                "creationTimestamp": "2024-01-01T00:00:00.123456Z",
            },
            "spec": {"replicas": 1},
            "status": {"readyReplicas": 1},
        }]}
        app = App(copy.deepcopy(DEFAULT_CONFIG), factory)
        browser = Browser(app, Gvr.parse("apps/v1/deployments"))
        browser.init()

        browser.refresh()

        self.assertEqual([path for path, _ in browser.table.rows], ["ns/a"])
        self.assertEqual(app.flash().message, "")


class TestApp(unittest.TestCase):

    def test_settings_come_from_config(self):
        config = copy.deepcopy(DEFAULT_CONFIG)
        config['connection']['call_timeout'] = 3
        config['browser']['read_only'] = True

        app = App(config, Mock(spec=KubeClient))

        self.assertEqual(app.call_timeout(), 3.0)
        self.assertTrue(app.is_read_only())
        self.assertEqual(app.refresh_rate(), 2.0)
        self.assertEqual(app.flash_delay(), 5.0)
        self.assertEqual(app.styles.dialog().button_focus_bg_color, "dodgerblue")


if __name__ == '__main__':
    unittest.main()
