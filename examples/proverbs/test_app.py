"""Tests for the proverbs example."""

from switchyard.testing import TestClient


class TestProverbsApp:
    async def test_index_is_ok(self, example_app) -> None:
        async with TestClient(example_app) as client:
            response = await client.get("/")
            assert response.status == 200
            assert response.text == ""

    async def test_unclaimed_path_falls_to_root_handler(self, example_app) -> None:
        async with TestClient(example_app) as client:
            response = await client.get("/anything/else")
            assert response.status == 200
            assert response.text == ""

    async def test_proverbs_serves_file_with_prefix_stripped(self, example_app) -> None:
        async with TestClient(example_app) as client:
            response = await client.get("/proverbs/readme.txt")
            assert response.status == 200
            assert "Errors are values." in response.text

    async def test_proverbs_index(self, example_app) -> None:
        async with TestClient(example_app) as client:
            response = await client.get("/proverbs/")
            assert response.status == 200
            assert "<h1>Proverbs</h1>" in response.text

    async def test_proverbs_without_slash_redirects(self, example_app) -> None:
        async with TestClient(example_app) as client:
            response = await client.get("/proverbs")
            assert response.status == 301
            assert response.header("location") == "/proverbs/"

    async def test_missing_proverb_is_404(self, example_app) -> None:
        async with TestClient(example_app) as client:
            response = await client.get("/proverbs/nope.txt")
            assert response.status == 404

    async def test_static_files_are_not_at_root(self, example_app) -> None:
        async with TestClient(example_app) as client:
            response = await client.get("/readme.txt")
            assert response.status == 200
            assert response.text == ""
