"""Korean public holidays (공휴일) by year."""

KOREAN_PUBLIC_HOLIDAYS: dict[int, tuple[str, ...]] = {
    2025: (
        "2025-01-01",  # 신정
        "2025-02-09",  # 설날
        "2025-02-10",
        "2025-02-11",
        "2025-03-01",  # 삼일절
        "2025-05-05",  # 어린이날
        "2025-05-13",  # 부처님오신날
        "2025-06-06",  # 현충일
        "2025-08-15",  # 광복절
        "2025-09-16",  # 추석
        "2025-09-17",
        "2025-09-18",
        "2025-10-03",  # 개천절
        "2025-10-09",  # 한글날
        "2025-12-25",  # 성탄절
    ),
}
