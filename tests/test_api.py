from fastapi.testclient import TestClient

from api import app


client = TestClient(app)


def test_analyze_endpoint(tmp_path):
	(tmp_path / "a.c").write_bytes(b"x\r\n\ty\r\n")
	(tmp_path / "b.c").write_bytes(b"x\n  y\r\n")
	resp = client.post("/analyze", json={"root_path": str(tmp_path), "chunk_size": 3})
	assert resp.status_code == 200
	stats = resp.json()["statistics"]
	assert stats["total_files"] == 2
	assert stats["crlf_only_files"] == 1
	assert stats["mixed_eol_files"] == 1
	assert stats["mixed_eol_extensions"] == [".c"]
	assert resp.json()["errors"] == []


def test_analyze_endpoint_invalid_root(tmp_path):
	resp = client.post("/analyze", json={"root_path": str(tmp_path / "missing")})
	assert resp.status_code == 400


def test_analyze_endpoint_rejects_bad_chunk_size(tmp_path):
	resp = client.post("/analyze", json={"root_path": str(tmp_path), "chunk_size": 0})
	assert resp.status_code == 422
