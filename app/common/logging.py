from __future__ import annotations

import logging

from common.request_id import get_request_id


class RequestIdFilter(logging.Filter):
    """모든 로그 레코드에 현재 요청의 request_id를 붙입니다."""

    def filter(self, record: logging.LogRecord) -> bool:
        # formatter에서 %(request_id)s 를 안전하게 쓰도록 보장
        if not hasattr(record, "request_id"):
            record.request_id = get_request_id()  # type: ignore[attr-defined]
        return True
