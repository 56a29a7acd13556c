# User-facing strings. Clients display these verbatim.

INVALID_INPUT = "입력 데이터가 올바르지 않습니다"
DUPLICATE_APPLICATION = "이미 해당 기수에 지원하신 전화번호입니다"
APPLICATION_NOT_FOUND = "지원서를 찾을 수 없습니다"

APPLICATION_SUBMITTED = "지원서가 성공적으로 제출되었습니다"
APPLICATION_UPDATED = "지원서 상태가 성공적으로 업데이트되었습니다"
APPLICATION_DELETED = "지원서가 성공적으로 삭제되었습니다"

LIST_FAILED = "지원서를 불러오는데 실패했습니다"
SUBMIT_FAILED = "지원서 제출에 실패했습니다"
UPDATE_FAILED = "지원서 업데이트에 실패했습니다"
DELETE_FAILED = "지원서 삭제에 실패했습니다"
STATS_FAILED = "통계를 불러오는데 실패했습니다"

# Field-level validation messages, keyed by error kind ("default" covers the rest,
# "element" covers errors on a single list entry)
FIELD_MESSAGES: dict[str, dict[str, str]] = {
    "name": {
        "default": "성명을 입력해주세요",
        "over_max": "이름은 50자 이하로 입력해주세요",
    },
    "phone": {"default": "010-1234-5678 형식으로 입력해주세요"},
    "birthDate": {"default": "생년월일을 올바르게 입력해주세요"},
    "gender": {"default": "성별을 선택해주세요"},
    "companyPosition": {
        "default": "소속과 직위를 입력해주세요",
        "over_max": "소속과 직위는 200자 이하로 입력해주세요",
    },
    "address": {"default": "주소는 300자 이하로 입력해주세요"},
    "interests": {
        "default": "관심 분야를 최소 1개 이상 선택해주세요",
        "over_max": "관심 분야는 최대 10개까지 선택 가능합니다",
        "element": "관심 분야 항목은 문자열이어야 합니다",
    },
    "golf": {"default": "골프 여부를 선택해주세요"},
    "referrer": {"default": "추천인은 100자 이하로 입력해주세요"},
    "taxInvoice": {"default": "세금계산서 발행 여부를 선택해주세요"},
    "generation": {
        "default": "기수를 선택해주세요",
        "over_max": "유효하지 않은 기수입니다",
    },
    "status": {"default": "유효하지 않은 상태입니다"},
    "adminNotes": {"default": "관리자 메모를 올바르게 입력해주세요"},
    "reviewedBy": {"default": "검토자를 올바르게 입력해주세요"},
}
