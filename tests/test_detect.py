"""
イベント種別判定のテスト

lambreq.detect モジュールと、アダプター作成時の判定をテストします。
"""

import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest

from lambreq import (
    HttpApi,
    HttpApiRequest,
    RestApi,
    RestApiRequest,
    UnsupportedEventError,
    create_request,
    detect_event_kind,
)


def create_rest_event(**overrides):
    """テスト用 v1.0 イベントを作成"""
    event = {
        "resource": "/",
        "path": "/",
        "httpMethod": "GET",
        "headers": {},
        "multiValueHeaders": {},
        "queryStringParameters": None,
        "multiValueQueryStringParameters": None,
        "pathParameters": None,
        "stageVariables": None,
        "requestContext": {},
        "body": None,
        "isBase64Encoded": False,
    }
    event.update(overrides)
    return event


def create_http_event(**overrides):
    """テスト用 v2.0 イベントを作成"""
    event = {
        "version": "2.0",
        "routeKey": "$default",
        "rawPath": "/",
        "rawQueryString": "",
        "headers": {},
        "requestContext": {
            "http": {"method": "GET", "path": "/", "protocol": "HTTP/1.1"},
            "timeEpoch": 0,
        },
        "isBase64Encoded": False,
    }
    event.update(overrides)
    return event


class TestDetectEventKind:
    """detect_event_kind 関数のテスト"""

    def test_rest_event(self):
        """v1.0 イベントの判定"""
        assert detect_event_kind(create_rest_event()) == "v1"

    def test_minimal_rest_event(self):
        """httpMethod と path のみでも v1.0 と判定"""
        assert detect_event_kind({"httpMethod": "POST", "path": "/users"}) == "v1"

    def test_http_event(self):
        """v2.0 イベントの判定"""
        assert detect_event_kind(create_http_event(rawPath="/hello")) == "v2"

    def test_version_only(self):
        """version が 2.0 なら rawPath がなくても v2.0"""
        assert detect_event_kind({"version": "2.0"}) == "v2"

    def test_raw_path_only(self):
        """rawPath があれば version がなくても v2.0"""
        assert detect_event_kind({"rawPath": "/"}) == "v2"

    def test_http_check_takes_precedence(self):
        """両方の条件を満たすイベントは v2.0"""
        event = create_http_event(httpMethod="GET", path="/")
        assert detect_event_kind(event) == "v2"

    def test_version_1_is_not_http(self):
        """version が 1.0 のイベントは v1.0 の条件で判定"""
        event = create_rest_event(version="1.0")
        assert detect_event_kind(event) == "v1"

    def test_empty_event(self):
        """空イベントはサポート外"""
        with pytest.raises(UnsupportedEventError):
            detect_event_kind({})

    def test_method_without_path(self):
        """httpMethod のみのイベントはサポート外"""
        with pytest.raises(UnsupportedEventError):
            detect_event_kind({"httpMethod": "GET"})

    def test_non_mapping_event(self):
        """辞書以外はサポート外"""
        with pytest.raises(UnsupportedEventError):
            detect_event_kind(None)

    def test_event_not_mutated(self):
        """判定でイベントが変更されないこと"""
        event = create_rest_event()
        snapshot = dict(event)
        detect_event_kind(event)
        assert event == snapshot


class TestAdapterConstruction:
    """アダプター作成時の判定テスト"""

    def test_rest_request_rejects_http_event(self):
        """RestApi.Request に v2.0 イベントを渡すとエラー"""
        with pytest.raises(UnsupportedEventError) as exc_info:
            RestApi.Request(create_http_event())
        assert "v1.0" in exc_info.value.message

    def test_http_request_rejects_rest_event(self):
        """HttpApi.Request に v1.0 イベントを渡すとエラー"""
        with pytest.raises(UnsupportedEventError) as exc_info:
            HttpApi.Request(create_rest_event())
        assert "v2.0" in exc_info.value.message

    def test_rejects_unknown_event(self):
        """どちらのアダプターも不明なイベントを拒否"""
        with pytest.raises(UnsupportedEventError):
            RestApi.Request({"foo": "bar"})
        with pytest.raises(UnsupportedEventError):
            HttpApi.Request({"foo": "bar"})

    def test_create_request_picks_adapter(self):
        """create_request がイベント種別に応じたアダプターを返す"""
        assert isinstance(create_request(create_rest_event()), RestApiRequest)
        assert isinstance(create_request(create_http_event()), HttpApiRequest)

    def test_create_request_unknown_event(self):
        """create_request は不明なイベントを拒否"""
        with pytest.raises(UnsupportedEventError):
            create_request({})
