"""
01. クイックスタート - 最もシンプルな lambreq の使い方

REST API (v1.0) と HTTP API (v2.0) のイベントを同じコードで扱うサンプルです。
"""

from lambreq import BodyParseError, Response, create_request


def lambda_handler(event, context):
    request = create_request(event)

    if request.get_method() == "GET":
        tags = request.get_query_str("tag", "")
        return Response.json({"path": request.get_path(), "tags": tags})

    try:
        name = request.get_input("name", "anonymous")
    except BodyParseError as e:
        return Response.json({"error": e.message}, 400)

    return Response.json({"message": f"Hello {name}!"}, 201)


if __name__ == "__main__":
    # ローカルテスト
    print("=== lambreq クイックスタート テスト ===")

    # テスト 1: HTTP API (v2.0) の複数値クエリ
    event = {
        "version": "2.0",
        "rawPath": "/items",
        "rawQueryString": "tag=a&tag=b",
        "headers": {},
        "requestContext": {"http": {"method": "GET"}},
    }
    print(f"GET /items?tag=a&tag=b: {lambda_handler(event, None)['body']}")

    # テスト 2: REST API (v1.0) の JSON ボディ
    event = {
        "httpMethod": "POST",
        "path": "/hello",
        "headers": {"Content-Type": "application/json"},
        "body": '{"name": "lambreq"}',
    }
    print(f"POST /hello: {lambda_handler(event, None)['body']}")
