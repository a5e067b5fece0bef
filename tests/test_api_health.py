"""HTTP tests for the health check."""

from sqlalchemy import text


async def test_health_with_full_schema(client):
    response = await client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["checks"] == {"database": "healthy", "schema": "healthy"}


async def test_health_reports_missing_tables(client, engine):
    async with engine.begin() as conn:
        await conn.execute(text("DROP TABLE course_skills"))

    response = await client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "degraded"
    assert body["checks"]["database"] == "healthy"
    assert body["checks"]["schema"] == "missing: course_skills"
