from __future__ import annotations

import threading
import time

from result import Err, Ok, Result, is_err, is_ok

from yamlprops.document import ConfigYamlError
from yamlprops.registry import Config
from yamlprops.sources import FetchError, ManualConfigSource, SCMConfigSource


class CountingFetcher:
    def __init__(self, result: Result[str, FetchError], delay: float = 0.0) -> None:
        self.result = result
        self.delay = delay
        self.calls: list[SCMConfigSource] = []
        self._lock = threading.Lock()

    def fetch(self, source: SCMConfigSource) -> Result[str, FetchError]:
        with self._lock:
            self.calls.append(source)
        if self.delay:
            time.sleep(self.delay)
        return self.result


def _scm_config() -> Config:
    return Config(
        name="remote",
        category="example",
        source=SCMConfigSource(
            repository="settings",
            owner="acme",
            branch="main",
            credential_id="token",
            path="app.yaml",
        ),
    )


def test_manual_text_is_returned_verbatim() -> None:
    config = Config(name="test", source=ManualConfigSource(text="version: 1.0\n"))

    assert config.get_yaml_config().unwrap() == "version: 1.0\n"
    assert config.get_config_map().unwrap() == {"version": 1.0}
    assert config.is_resolved is True


def test_config_is_unresolved_until_first_access() -> None:
    config = _scm_config()
    fetcher = CountingFetcher(Ok("a: 1"))

    assert config.is_resolved is False
    assert fetcher.calls == []

    config.get_config_map(fetcher)

    assert config.is_resolved is True


def test_source_is_resolved_once_across_text_and_map() -> None:
    config = _scm_config()
    fetcher = CountingFetcher(Ok("a: 1"))

    first_map = config.get_config_map(fetcher)
    text = config.get_yaml_config(fetcher)
    second_map = config.get_config_map(fetcher)

    assert len(fetcher.calls) == 1
    assert text.unwrap() == "a: 1"
    assert first_map.unwrap() == second_map.unwrap() == {"a": 1}


def test_concurrent_first_access_fetches_once() -> None:
    config = _scm_config()
    fetcher = CountingFetcher(Ok("a: 1"), delay=0.05)
    results: list[object] = []

    def worker() -> None:
        results.append(config.get_config_map(fetcher).unwrap())

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(fetcher.calls) == 1
    assert len(results) == 8
    assert all(result == {"a": 1} for result in results)


def test_fetch_failure_is_cached() -> None:
    config = _scm_config()
    failing = CountingFetcher(Err(FetchError(source="acme/settings@main:app.yaml", message="boom")))

    first = config.get_config_map(failing)
    second = config.get_config_map(CountingFetcher(Ok("a: 1")))

    assert is_err(first)
    assert is_err(second)
    assert second.err_value.message == "boom"
    assert len(failing.calls) == 1


def test_scm_source_without_fetcher_fails() -> None:
    result = _scm_config().get_yaml_config()

    assert is_err(result)
    assert "No SCM fetcher configured" in result.err_value.message


def test_parse_failure_keeps_text_available() -> None:
    config = Config(name="broken", source=ManualConfigSource(text="a: [1, 2\n"))

    map_result = config.get_config_map()

    assert is_err(map_result)
    assert isinstance(map_result.err_value, ConfigYamlError)
    assert map_result.err_value.name == "broken"
    assert is_ok(config.get_yaml_config())


def test_parse_failure_is_logged(log_records) -> None:
    Config(name="broken", source=ManualConfigSource(text="- a\n")).get_config_map()

    errors = [record for record in log_records if record["level"].name == "ERROR"]
    assert errors
    assert errors[-1]["extra"]["name"] == "broken"


def test_empty_text_yields_empty_map() -> None:
    assert Config(name="empty", source=ManualConfigSource(text="")).get_config_map().unwrap() == {}


def test_invalid_timestamp_is_cached_as_yaml_error() -> None:
    config = Config(name="dates", source=ManualConfigSource(text="released: 2024-13-45\n"))

    first = config.get_config_map()
    second = config.get_config_map()

    assert is_err(first)
    assert isinstance(first.err_value, ConfigYamlError)
    assert second == first


def test_returned_map_cannot_change_the_cached_one() -> None:
    config = Config(name="shared", source=ManualConfigSource(text="servers:\n  - web1\nlimits:\n  cpu: 2\n"))

    mutated = config.get_config_map().unwrap()
    mutated["servers"].append("web2")
    mutated["limits"]["cpu"] = 8
    mutated["extra"] = True

    assert config.get_config_map().unwrap() == {"servers": ["web1"], "limits": {"cpu": 2}}
