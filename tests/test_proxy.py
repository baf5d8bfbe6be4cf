import threading

from nacossdk.security.proxy import SecurityProxy
from nacossdk.security.resources import build_naming_resource


class FakeClient:
    def __init__(self, info=None, fail=False, logins_wanted=None):
        self.info = info
        self.fail = fail
        self.logins = 0
        self.servers = []
        self.logins_wanted = logins_wanted
        self.reached = threading.Event()

    def login(self):
        self.logins += 1
        if self.logins_wanted is not None and self.logins >= self.logins_wanted:
            self.reached.set()
        if self.fail:
            raise RuntimeError("cannot log in")
        return True

    def get_security_info(self, resource):
        return self.info

    def update_server_list(self, server_list):
        self.servers.append(server_list)


def test_login_continues_after_a_failure():
    failing = FakeClient(fail=True)
    working = FakeClient()
    SecurityProxy([failing, working]).login()
    assert (failing.logins, working.logins) == (1, 1)


def test_security_info_is_merged_in_order():
    proxy = SecurityProxy(
        [
            FakeClient({"accessToken": "token", "ak": "first"}),
            FakeClient(None),
            FakeClient({"ak": "second"}),
        ]
    )
    info = proxy.get_security_info(build_naming_resource("", "grp", "svc"))
    assert info == {"accessToken": "token", "ak": "second"}


def test_update_server_list_reaches_every_client():
    clients = [FakeClient(), FakeClient()]
    SecurityProxy(clients).update_server_list(["127.0.0.1:8848"])
    assert [c.servers for c in clients] == [[["127.0.0.1:8848"]], [["127.0.0.1:8848"]]]


def test_auto_refresh_logs_in_repeatedly_until_stopped():
    client = FakeClient(logins_wanted=2)
    stop = threading.Event()
    thread = SecurityProxy([client]).auto_refresh(stop, 0.01)
    assert client.reached.wait(5)
    stop.set()
    thread.join(2)
    assert not thread.is_alive()


def test_auto_refresh_does_nothing_once_stopped():
    client = FakeClient()
    stop = threading.Event()
    stop.set()
    thread = SecurityProxy([client]).auto_refresh(stop, 0.01)
    thread.join(2)
    assert not thread.is_alive()
    assert client.logins == 0