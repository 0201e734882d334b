STRINGS = {
    "app_title": "🎁 위시포켓",
    "created": "✅ {owner}님의 위시리스트가 만들어졌어요!",
    "edit_link": "편집 링크",
    "share_link": "공유 링크",
    "list_title": "{owner}님의 위시리스트",
    "editor_title": "{owner}님의 위시포켓",
    "birthday": "생일",
    "d_day": "D-{days}",
    "d_day_today": "D-DAY 🎉",
    "items_count": "담은 상품 ({count})",
    "empty": "아직 담은 상품이 없어요. 링크를 넣어보세요!",
    "scraping": "상품 정보 가져오는 중...",
    "item_added": "✅ 리스트에 담았어요: {title}",
    "item_removed": "🗑 상품을 삭제했어요.",
    "item_missing": "해당 상품이 리스트에 없어요: {item_id}",
    "list_deleted": "🗑 리스트를 삭제했어요.",
    "invalid_url": "올바른 URL을 입력해주세요.",
    "not_found": "리스트를 찾을 수 없습니다.",
    "error": "⚠️ {message}",
    "col_no": "#",
    "col_item": "상품",
    "col_price": "가격",
    "col_site": "쇼핑몰",
    "col_comment": "코멘트",
    "col_id": "ID",
    "priority_high": "★",
    "price": "{price}원",
    "price_unknown": "-",
    "create_own": "나도 위시리스트 만들기: wishpocket create",
}
