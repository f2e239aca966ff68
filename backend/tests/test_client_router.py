import pytest

from stockroom.client import AppContainer, ClientSession, DirectoryFragmentLoader, Location, ViewKind, ViewRouter
from stockroom.client.controllers import ViewController
from stockroom.client.errors import FragmentLoadError, FragmentNotFound

pytestmark = pytest.mark.client


class FakeLoader:
    """Serves fragments from a dict and records what was fetched."""

    def __init__(self, fragments=None, fail_with=None):
        self.fragments = fragments if fragments is not None else {
            view: f'<section class="view" id="{view}"></section>' for view in ("landing", "dashboard", "products", "sales", "reports")
        }
        self.fail_with = fail_with
        self.fetched = []

    def fetch(self, view_id):
        self.fetched.append(view_id)
        if self.fail_with is not None:
            raise self.fail_with
        if view_id not in self.fragments:
            raise FragmentNotFound(view_id)
        return self.fragments[view_id]


def make_router(logged_in=True, fragment="", loader=None):
    session = ClientSession()
    if logged_in:
        session.store("alice", "token")
    router = ViewRouter(AppContainer(), loader or FakeLoader(), session, Location(fragment))
    return router


class TestNavigation:
    def test_empty_fragment_defaults_to_dashboard(self):
        router = make_router()

        assert router.navigate() == "dashboard"
        assert router.loader.fetched == ["dashboard"]
        assert router.location.fragment == "dashboard"

    def test_inserted_section_marked_active(self):
        router = make_router(fragment="products")

        router.navigate()

        assert router.container.active
        assert 'class="view active"' in router.container.html

    def test_registered_initializer_runs_after_insertion(self):
        router = make_router(fragment="sales")
        seen = []
        router.register("sales", lambda: seen.append(router.container.html))

        router.navigate()

        assert seen == ['<section class="view active" id="sales"></section>']

    def test_reregistering_replaces_initializer(self):
        router = make_router(fragment="reports")
        calls = []
        router.register("reports", lambda: calls.append("first"))
        router.register(ViewKind.REPORTS, lambda: calls.append("second"))

        router.navigate()

        assert calls == ["second"]
        assert len(router.registry) == 1

    def test_view_without_initializer_still_renders(self):
        router = make_router(fragment="products")

        assert router.navigate() == "products"
        assert router.current_handle is None
        assert router.container.error is None

    def test_register_rejects_non_callables(self):
        with pytest.raises(TypeError):
            make_router().register("dashboard", 42)


class TestSessionGuard:
    @pytest.mark.parametrize("view", ["dashboard", "products", "sales", "reports", "unknown"])
    def test_redirects_to_landing_without_session(self, view):
        router = make_router(logged_in=False, fragment=view)
        called = []
        router.register(view, lambda: called.append(view))

        shown = router.navigate()

        assert shown == "landing"
        assert router.location.fragment == "landing"
        assert view not in router.loader.fetched
        assert called == []

    def test_landing_allowed_without_session(self):
        router = make_router(logged_in=False, fragment="landing")

        assert router.navigate() == "landing"
        assert router.loader.fetched == ["landing"]


class TestLoadFailures:
    def test_unknown_view_renders_error(self):
        router = make_router(fragment="nope")

        router.navigate()

        assert router.container.error == 'Failed to load "nope" view.'
        assert 'color:red' in router.container.html
        assert router.current_view == "nope"

    def test_network_error_renders_error(self):
        router = make_router(fragment="dashboard", loader=FakeLoader(fail_with=FragmentLoadError("dashboard")))

        router.navigate()

        assert router.container.error == 'Failed to load "dashboard" view.'

    def test_initializer_error_renders_error(self):
        router = make_router(fragment="dashboard")

        def explode():
            raise RuntimeError("boom")

        router.register("dashboard", explode)

        router.navigate()

        assert router.container.error == 'Failed to load "dashboard" view.'

    def test_directory_loader_missing_file(self, tmp_path):
        loader = DirectoryFragmentLoader(str(tmp_path))

        with pytest.raises(FragmentNotFound):
            loader.fetch("dashboard")
        with pytest.raises(FragmentNotFound):
            loader.fetch("../secrets")

    def test_directory_loader_reads_packaged_views(self):
        markup = DirectoryFragmentLoader().fetch("products")

        assert 'id="product-list"' in markup


class TestHistory:
    def test_hash_change_navigates_after_start(self):
        router = make_router(fragment="dashboard")
        router.start()

        router.location.set_hash("#products")

        assert router.current_view == "products"
        assert router.loader.fetched == ["dashboard", "products"]

    def test_back_and_forward_navigate(self):
        router = make_router(fragment="dashboard")
        router.start()
        router.go("sales")

        router.location.back()
        assert router.current_view == "dashboard"

        router.location.forward()
        assert router.current_view == "sales"

    def test_stop_ignores_further_changes(self):
        router = make_router(fragment="dashboard")
        router.start()
        router.stop()

        router.location.set_hash("reports")

        assert router.current_view == "dashboard"

    def test_go_without_start_still_navigates(self):
        router = make_router()

        assert router.go(ViewKind.REPORTS) == "reports"
        assert router.location.history == ["", "reports"]


class RecordingController(ViewController):
    view_id = "products"

    def __init__(self, session, navigator):
        super().__init__(session, navigator)
        self.mounted = []
        self.unmounted = []

    def mount(self, container):
        handle = super().mount(container)
        self.mounted.append(handle)
        return handle

    def unmount(self, handle):
        self.unmounted.append(handle)
        super().unmount(handle)


class TestLifecycle:
    def test_previous_view_unmounted_on_navigation(self):
        router = make_router(fragment="products")
        controller = RecordingController(router.session, router)
        router.register("products", controller)
        router.start()
        first = router.current_handle

        router.go("dashboard")

        assert controller.unmounted == [first]
        assert first.mounted is False
        assert router.current_handle is None

    def test_remount_gets_fresh_handle(self):
        router = make_router(fragment="products")
        controller = RecordingController(router.session, router)
        router.register("products", controller)
        router.start()
        router.go("dashboard")
        router.go("products")

        assert len(controller.mounted) == 2
        assert controller.mounted[0] is not controller.mounted[1]
        assert router.current_handle is controller.mounted[1]

    def test_controller_guard_redirects_without_session(self):
        router = make_router(logged_in=False, fragment="products")
        controller = RecordingController(router.session, router)

        handle = controller.mount(router.container)

        assert handle is None
        assert router.current_view == "landing"
        assert router.location.fragment == "landing"

    def test_last_navigation_wins(self):
        router = make_router(fragment="products")

        def jump_to_sales():
            router.go("sales")

        router.register("products", jump_to_sales)
        router.start()

        assert router.current_view == "sales"
        assert router.location.fragment == "sales"
        assert 'id="sales"' in router.container.html
