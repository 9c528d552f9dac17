import threading

import httpx
import pytest

from deployer.exceptions import ArtifactNotFoundError, ResourceResolutionError
from deployer.modules.resource import MavenCoordinates, MavenResource
from deployer.modules.resource.resolver import LocalRepositoryResolver, NexusArtifactResolver, build_resolver
from deployer.settings import Settings


def build_settings(tmp_path, **overrides) -> Settings:
    defaults = {
        "nexus_base_url": "http://nexus.example.com",
        "nexus_repository": "releases",
        "local_repository": str(tmp_path / "repo"),
    }
    defaults.update(overrides)
    return Settings(_env_file=None, **defaults)


def test_local_resolver_finds_repository_layout(tmp_path):
    coords = MavenCoordinates.parse("com.example:demo:jar:exec:1.0")
    path = tmp_path / "com" / "example" / "demo" / "1.0" / "demo-1.0-exec.jar"
    path.parent.mkdir(parents=True)
    path.write_bytes(b"local")

    artifact = LocalRepositoryResolver(tmp_path).resolve(coords)

    assert artifact.file == path
    with artifact.open() as fh:
        assert fh.read() == b"local"


def test_local_resolver_missing_artifact(tmp_path):
    with pytest.raises(ArtifactNotFoundError):
        LocalRepositoryResolver(tmp_path).resolve(MavenCoordinates.parse("g:a:1.0"))


def test_nexus_download_writes_file(tmp_path):
    coords = MavenCoordinates(group_id="com.example.bds", artifact_id="bds-ui-server", version="1.0.30", extension="war")

    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/repository/releases/com/example/bds/bds-ui-server/1.0.30/bds-ui-server-1.0.30.war"
        return httpx.Response(200, content=b"binary-data")

    client = httpx.Client(transport=httpx.MockTransport(handler))
    resolver = NexusArtifactResolver(build_settings(tmp_path), client=client)

    artifact = resolver.resolve(coords)

    assert artifact.file.exists()
    assert artifact.file.read_bytes() == b"binary-data"
    assert [p.name for p in artifact.file.parent.iterdir()] == ["bds-ui-server-1.0.30.war"]


def test_nexus_reuses_local_artifact(tmp_path):
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(200, content=b"binary-data")

    client = httpx.Client(transport=httpx.MockTransport(handler))
    resolver = NexusArtifactResolver(build_settings(tmp_path), client=client)
    coords = MavenCoordinates.parse("g:a:1.0")

    first = resolver.resolve(coords)
    second = resolver.resolve(coords)

    assert first.file == second.file
    assert len(calls) == 1


def test_nexus_not_found(tmp_path):
    client = httpx.Client(transport=httpx.MockTransport(lambda request: httpx.Response(404)))
    resolver = NexusArtifactResolver(build_settings(tmp_path), client=client)

    with pytest.raises(ArtifactNotFoundError):
        resolver.resolve(MavenCoordinates.parse("g:a:1.0"))
    assert not list((tmp_path / "repo").rglob("*.jar*"))


def test_nexus_server_error_is_resolution_error(tmp_path):
    client = httpx.Client(transport=httpx.MockTransport(lambda request: httpx.Response(503)))
    resolver = NexusArtifactResolver(build_settings(tmp_path), client=client)

    with pytest.raises(ResourceResolutionError) as excinfo:
        resolver.resolve(MavenCoordinates.parse("g:a:1.0"))
    assert not isinstance(excinfo.value, ArtifactNotFoundError)
    assert isinstance(excinfo.value.__cause__, httpx.HTTPStatusError)


def test_nexus_transport_error_through_resource(tmp_path):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = httpx.Client(transport=httpx.MockTransport(handler))
    resource = MavenResource.parse("g:a:1.0", NexusArtifactResolver(build_settings(tmp_path), client=client))

    with pytest.raises(ResourceResolutionError) as excinfo:
        resource.get_file()
    assert isinstance(excinfo.value.__cause__, httpx.ConnectError)


def test_nexus_sends_credentials(tmp_path):
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.headers["authorization"].startswith("Basic ")
        return httpx.Response(200, content=b"ok")

    client = httpx.Client(transport=httpx.MockTransport(handler))
    settings = build_settings(tmp_path, nexus_username="deploy", nexus_password="secret")

    NexusArtifactResolver(settings, client=client).resolve(MavenCoordinates.parse("g:a:1.0"))


def test_build_resolver_offline(tmp_path):
    assert isinstance(build_resolver(build_settings(tmp_path, resolver_offline=True)), LocalRepositoryResolver)
    assert isinstance(build_resolver(build_settings(tmp_path)), NexusArtifactResolver)


def test_concurrent_downloads_do_not_mix_content(tmp_path):
    payloads = [b"A" * 200000, b"B" * 100000]
    barrier = threading.Barrier(2, timeout=10)
    lock = threading.Lock()

    def handler(request: httpx.Request) -> httpx.Response:
        with lock:
            payload = payloads.pop(0)

        def chunks():
            yield payload[:65536]
            # both downloads are in flight before either finishes
            barrier.wait()
            for start in range(65536, len(payload), 65536):
                yield payload[start:start + 65536]

        return httpx.Response(200, content=chunks())

    client = httpx.Client(transport=httpx.MockTransport(handler))
    resolver = NexusArtifactResolver(build_settings(tmp_path), client=client)
    coords = MavenCoordinates.parse("g:a:1.0")
    results, errors = [], []

    def worker():
        try:
            results.append(resolver.resolve(coords))
        except Exception as exc:  # noqa: BLE001
            errors.append(exc)

    threads = [threading.Thread(target=worker) for _ in range(2)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert errors == []
    assert len(results) == 2
    content = results[0].file.read_bytes()
    assert content in (b"A" * 200000, b"B" * 100000)
    assert [p.name for p in results[0].file.parent.iterdir()] == ["a-1.0.jar"]


def test_unwritable_repository_is_resolution_error(tmp_path):
    blocker = tmp_path / "repo"
    blocker.write_text("not a directory")
    client = httpx.Client(transport=httpx.MockTransport(lambda request: httpx.Response(200, content=b"x")))
    resolver = NexusArtifactResolver(build_settings(tmp_path), client=client)

    with pytest.raises(ResourceResolutionError) as excinfo:
        resolver.resolve(MavenCoordinates.parse("g:a:1.0"))
    assert isinstance(excinfo.value.__cause__, OSError)
