from superdevs.response import error_response, success_response


def test_success_response_wraps_data():
    assert success_response({"a": 1}) == {"success": True, "data": {"a": 1}}


def test_success_response_with_string():
    assert success_response("Solana HTTP Server is running") == {
        "success": True,
        "data": "Solana HTTP Server is running",
    }


def test_error_response():
    assert error_response("Invalid input: Missing required fields") == {
        "success": False,
        "error": "Invalid input: Missing required fields",
    }