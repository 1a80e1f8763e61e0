# tests/test_api.py

"""
API Endpoint Tests - Tests for all FastAPI endpoints
"""

from fastapi import status



# ROOT / HEALTH


class TestHealthEndpoint:

    def test_root(self, client):
        response = client.get("/")
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["status"] == "running"

    def test_health_counts(self, client, seeded_question_repository):
        response = client.get("/health")
        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["status"] == "healthy"
        assert data["counts"] == {"questions": 5, "submissions": 0}



# SERVICE / SECTION / QUESTION ENDPOINTS


class TestServiceEndpoints:

    def test_find_or_create(self, client):
        created = client.post("/api/v1/services", json={"name": "Payments"})
        assert created.status_code == status.HTTP_201_CREATED

        found = client.post("/api/v1/services", json={"name": "payments"})
        assert found.status_code == status.HTTP_200_OK
        assert found.json()["id"] == created.json()["id"]

    def test_empty_name_rejected(self, client):
        response = client.post("/api/v1/services", json={"name": " "})
        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        assert response.json()["error_code"] == "VALIDATION_ERROR"

    def test_list_sorted_by_name(self, client):
        client.post("/api/v1/services", json={"name": "Zeta"})
        client.post("/api/v1/services", json={"name": "alpha"})
        names = [s["name"] for s in client.get("/api/v1/services").json()]
        assert names == ["alpha", "Zeta"]


class TestSectionEndpoints:

    def test_create_and_list(self, client):
        response = client.post("/api/v1/sections", json={"name": "Security", "description": "AuthN/Z"})
        assert response.status_code == status.HTTP_201_CREATED
        assert [s["name"] for s in client.get("/api/v1/sections").json()] == ["Security"]

    def test_name_required(self, client):
        response = client.post("/api/v1/sections", json={"name": ""})
        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


class TestQuestionEndpoints:

    def test_create_update_delete(self, client):
        created = client.post(
            "/api/v1/questions",
            json={"section_id": "s1", "text": "Are alerts routed?", "order": 3},
        )
        assert created.status_code == status.HTTP_201_CREATED
        qid = created.json()["id"]

        updated = client.put(f"/api/v1/questions/{qid}", json={"text": "Are alerts paged?"})
        assert updated.status_code == status.HTTP_200_OK
        assert updated.json()["text"] == "Are alerts paged?"
        assert updated.json()["order"] == 3

        assert client.delete(f"/api/v1/questions/{qid}").status_code == status.HTTP_204_NO_CONTENT
        assert client.get("/api/v1/questions").json() == []

    def test_list_ordered_by_section_then_order(self, client, seeded_question_repository):
        ids = [q["id"] for q in client.get("/api/v1/questions").json()]
        assert ids == ["q5", "q1", "q2", "q3", "q4"]

    def test_update_missing(self, client):
        response = client.put("/api/v1/questions/nope", json={"text": "x"})
        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["detail"]["error_code"] == "QUESTION_NOT_FOUND"

    def test_delete_missing(self, client):
        assert client.delete("/api/v1/questions/nope").status_code == status.HTTP_404_NOT_FOUND



# PRR SUBMISSION ENDPOINTS


def submit(client, answers, service_id="service1"):
    return client.post(
        "/api/v1/prr",
        json={
            "service_id": service_id,
            "user_id": "user1",
            "answers": [{"question_id": q, "response": r} for q, r in answers],
        },
    )


class TestSubmitEndpoint:

    def test_submit_success(self, client, seeded_question_repository):
        response = submit(client, [("q1", "Yes"), ("q2", "n/a"), ("qX", "Yes")])
        assert response.status_code == status.HTTP_201_CREATED

        data = response.json()
        assert set(data) == {"id", "service_id", "user_id", "timestamp", "answers", "section_scores"}
        assert data["section_scores"] == {
            "s1": {"section_id": "s1", "yes_count": 1, "no_count": 0, "na_count": 1},
        }
        assert response.headers["X-PRR-Scoring-Warnings"] == "1"

    def test_clean_submit_reports_no_warnings(self, client, seeded_question_repository):
        response = submit(client, [("q1", "Yes"), ("q3", "No")])
        assert response.status_code == status.HTTP_201_CREATED
        assert response.headers["X-PRR-Scoring-Warnings"] == "0"

    def test_warnings_count_every_skipped_answer(self, client, seeded_question_repository):
        # qX is unknown, q5 has no section, "maybe" is unrecognized
        response = submit(client, [("qX", "Yes"), ("q5", "Yes"), ("q1", "maybe")])
        assert response.status_code == status.HTTP_201_CREATED
        assert response.headers["X-PRR-Scoring-Warnings"] == "3"

    def test_empty_answers(self, client):
        response = submit(client, [])
        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        assert response.json()["message"] == "Answers cannot be empty"

    def test_blank_service_id(self, client):
        response = submit(client, [("q1", "Yes")], service_id=" ")
        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        assert response.json()["message"] == "Service ID cannot be empty"

    def test_malformed_json(self, client):
        response = client.post(
            "/api/v1/prr",
            content="{not json",
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == status.HTTP_400_BAD_REQUEST


class TestGetAndHistoryEndpoints:

    def test_get_by_id(self, client, seeded_question_repository):
        created = submit(client, [("q1", "Yes")]).json()
        response = client.get(f"/api/v1/prr/{created['id']}")
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["id"] == created["id"]

    def test_get_missing(self, client):
        response = client.get("/api/v1/prr/does-not-exist")
        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["detail"]["error_code"] == "PRR_NOT_FOUND"

    def test_history_requires_service_id(self, client):
        assert client.get("/api/v1/prr/history").status_code == status.HTTP_422_UNPROCESSABLE_ENTITY

    def test_history_filters_by_service(self, client, seeded_question_repository):
        submit(client, [("q1", "Yes")])
        submit(client, [("q1", "Yes")], service_id="other")
        data = client.get("/api/v1/prr/history", params={"service_id": "service1"}).json()
        assert len(data) == 1
        assert data[0]["service_id"] == "service1"


class TestCompareEndpoint:

    def test_compare_success(self, client, repositories, seeded_question_repository, submission_factory, later):
        store = repositories["submissions"]
        first = store.insert(submission_factory("prr-old", [("q1", "Yes"), ("q3", "No")])).model_dump()
        second = store.insert(
            submission_factory("prr-new", [("q1", "No"), ("q4", "Yes")], timestamp=later(1))
        ).model_dump()

        response = client.get(
            "/api/v1/prr/compare",
            params={"service_id": "service1", "prr_id1": second["id"], "prr_id2": first["id"]},
        )
        assert response.status_code == status.HTTP_200_OK

        data = response.json()
        assert data["serviceId"] == "service1"
        assert data["prrSubmissionIdOld"] == first["id"]
        assert data["prrSubmissionIdNew"] == second["id"]
        assert sorted(data["sectionComparison"]) == ["s1", "s2"]
        assert data["answerChanges"] == [
            {"questionId": "q1", "questionText": "Question 1 Text", "oldAnswer": "Yes", "newAnswer": "No"},
        ]
        assert [d["questionId"] for d in data["newlyAnsweredQuestions"]] == ["q4"]
        assert [d["questionId"] for d in data["noLongerAnsweredQuestions"]] == ["q3"]

    def test_same_ids(self, client):
        response = client.get(
            "/api/v1/prr/compare",
            params={"service_id": "service1", "prr_id1": "a", "prr_id2": "a"},
        )
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_missing_submission(self, client, seeded_question_repository):
        first = submit(client, [("q1", "Yes")]).json()
        response = client.get(
            "/api/v1/prr/compare",
            params={"service_id": "service1", "prr_id1": first["id"], "prr_id2": "missing"},
        )
        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_service_mismatch(self, client, seeded_question_repository):
        first = submit(client, [("q1", "Yes")]).json()
        second = submit(client, [("q1", "Yes")], service_id="other").json()
        response = client.get(
            "/api/v1/prr/compare",
            params={"service_id": "service1", "prr_id1": first["id"], "prr_id2": second["id"]},
        )
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_missing_params(self, client):
        response = client.get("/api/v1/prr/compare", params={"service_id": "service1"})
        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


class TestServiceSearchEndpoint:

    def test_match_with_prr(self, client, repositories, submission_factory, later):
        service, _ = repositories["services"].find_or_create("Payments API")
        repositories["submissions"].insert(
            submission_factory("prr-1", [("q1", "Yes")], service_id=service.id)
        )
        repositories["submissions"].insert(
            submission_factory("prr-2", [("q1", "No"), ("q3", "Yes")], service_id=service.id, timestamp=later(2))
        )

        response = client.get("/api/v1/search/services", params={"q": "payments"})
        assert response.status_code == status.HTTP_200_OK

        data = response.json()
        assert len(data) == 1
        assert data[0]["serviceId"] == service.id
        assert data[0]["serviceName"] == "Payments API"
        assert data[0]["latestPrrScores"] == {
            "s1": {"section_id": "s1", "yes_count": 0, "no_count": 1, "na_count": 0},
            "s2": {"section_id": "s2", "yes_count": 1, "no_count": 0, "na_count": 0},
        }
        assert data[0]["lastPrrTimestamp"].startswith(later(2).strftime("%Y-%m-%dT%H:%M:%S"))

    def test_match_without_prr(self, client, repositories):
        repositories["services"].find_or_create("Billing")
        repositories["services"].find_or_create("Search Indexer")

        data = client.get("/api/v1/search/services", params={"q": "BILL"}).json()
        assert len(data) == 1
        assert set(data[0]) == {"serviceId", "serviceName"}
        assert data[0]["serviceName"] == "Billing"

    def test_no_match(self, client, repositories):
        repositories["services"].find_or_create("Billing")
        response = client.get("/api/v1/search/services", params={"q": "ledger"})
        assert response.status_code == status.HTTP_200_OK
        assert response.json() == []

    def test_empty_query(self, client):
        response = client.get("/api/v1/search/services", params={"q": "  "})
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"]["message"] == "Query parameter 'q' cannot be empty"

    def test_missing_query(self, client):
        response = client.get("/api/v1/search/services")
        assert response.status_code == status.HTTP_400_BAD_REQUEST
