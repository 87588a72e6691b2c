from __future__ import annotations

STUDENT = {"name": "Asha", "rollnum": "R1", "branch": "CSE", "year": "2"}


def test_students_data_starts_empty(client, auth_header):
    resp = client.get("/getStudentsData", headers=auth_header)

    assert resp.status_code == 200
    assert resp.get_json() == []


def test_create_student(client, auth_header):
    resp = client.post("/createStudent", json=STUDENT, headers=auth_header)

    assert resp.status_code == 201
    assert resp.get_json() == STUDENT
    assert client.get("/getStudentsData", headers=auth_header).get_json() == [STUDENT]


def test_create_student_duplicate_roll(client, auth_header):
    client.post("/createStudent", json=STUDENT, headers=auth_header)

    resp = client.post("/createStudent", json={**STUDENT, "name": "Other"}, headers=auth_header)

    assert resp.status_code == 400
    assert resp.get_data(as_text=True) == "Roll number already exists."


def test_create_student_without_roll(client, auth_header):
    resp = client.post("/createStudent", json={"name": "Asha"}, headers=auth_header)

    assert resp.status_code == 400


def test_update_student(client, auth_header):
    client.post("/createStudent", json=STUDENT, headers=auth_header)

    resp = client.put(
        "/updateStudent",
        json={"rollnum": "R1", "name": "Asha K", "branch": "CSE", "year": "3"},
        headers=auth_header,
    )

    assert resp.status_code == 200
    assert resp.get_json() == {"name": "Asha K", "rollnum": "R1", "branch": "CSE", "year": "3"}


def test_update_missing_student(client, auth_header):
    resp = client.put("/updateStudent", json={"rollnum": "R9", "name": "X"}, headers=auth_header)

    assert resp.status_code == 404
    assert resp.get_data(as_text=True) == "Student not found."


def test_delete_student(client, auth_header):
    client.post("/createStudent", json=STUDENT, headers=auth_header)

    resp = client.delete("/deleteStudent/R1", headers=auth_header)
    assert resp.status_code == 200
    assert resp.get_data(as_text=True) == "Student deleted successfully."

    resp = client.delete("/deleteStudent/R1", headers=auth_header)
    assert resp.status_code == 404


def test_roll_number_with_spaces_round_trips(client, auth_header):
    resp = client.post("/createStudent", json={**STUDENT, "rollnum": " R1"}, headers=auth_header)
    assert resp.status_code == 201
    assert resp.get_json()["rollnum"] == " R1"

    resp = client.put("/updateStudent", json={"rollnum": " R1", "year": "3"}, headers=auth_header)
    assert resp.status_code == 200

    assert client.delete("/deleteStudent/%20R1", headers=auth_header).status_code == 200
    assert client.get("/getStudentsData", headers=auth_header).get_json() == []
