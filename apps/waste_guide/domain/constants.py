"""Domain Constants.

도메인 레이어의 상수 정의.
"""

# HSY 폐기물 가이드 API (영문 카탈로그)
HSY_CATALOG_URL = "https://dev.klapi.hsy.fi/int2001/v1/waste-guide-api/waste-pages?lang=en"
HSY_DETAIL_URL = "https://dev.klapi.hsy.fi/int2001/v1/waste-guide-api/waste-pages"

# 카탈로그 응답에서 아이템 배열을 담는 키 (우선순위 순)
ITEM_ARRAY_KEYS: tuple[str, ...] = ("hits", "items", "results", "data")

# 카탈로그 응답에서 전체 개수를 담는 키 (우선순위 순)
TOTAL_COUNT_KEYS: tuple[str, ...] = ("total", "totalCount", "total_count")

# 페이지네이션
PAGINATION_TRIAL_PAGE = 3  # 3번째 페이지 (offset = 2 * page_size)
DEFAULT_PAGE_CEILING = 35
DEFAULT_PAGE_DELAY_SECONDS = 0.1

# 캐시
DEFAULT_CACHE_TTL_SECONDS = 24 * 60 * 60  # 24시간
EXPECTED_MIN_CATALOG_ITEMS = 600

# 매칭 점수 가중치
SCORE_TITLE_CONTAINS_NAME = 4
SCORE_SYNONYM_NAME = 3
SCORE_MATERIAL_TOKEN = 2
SCORE_CATEGORY = 1
SCORE_WORD_OVERLAP = 1

# 매칭에 사용되는 최소 길이 (이 값보다 길어야 함)
MIN_TERM_LENGTH = 2

# 검색 결과 최대 개수
SEARCH_RESULT_LIMIT = 10

UNKNOWN_OBJECT = "unknown object"
