"""Display labels for exports, reports and receipts.

Two languages are supported, English and Arabic. The active one is chosen
with the ``REPORT_LANGUAGE`` setting.
"""

import calendar

from dorm_app.models.student import Department, StudyLevel

MONTH_NAMES = {
    "en": tuple(calendar.month_name[1:]),
    "ar": (
        "يناير", "فبراير", "مارس", "أبريل", "مايو", "يونيو",
        "يوليو", "أغسطس", "سبتمبر", "أكتوبر", "نوفمبر", "ديسمبر",
    ),
}

DEPARTMENT_LABELS = {
    "en": {
        Department.MEDICINE: "Faculty of Medicine",
        Department.ENGINEERING: "Faculty of Engineering",
        Department.SCIENCE: "Faculty of Science",
        Department.ARTS: "Faculty of Arts",
        Department.BUSINESS: "Faculty of Business Administration",
    },
    "ar": {
        Department.MEDICINE: "كلية الطب",
        Department.ENGINEERING: "كلية الهندسة",
        Department.SCIENCE: "كلية العلوم",
        Department.ARTS: "كلية الآداب",
        Department.BUSINESS: "كلية إدارة الأعمال",
    },
}

STUDY_LEVEL_LABELS = {
    "en": {
        StudyLevel.FIRST_YEAR: "First Year",
        StudyLevel.SECOND_YEAR: "Second Year",
        StudyLevel.THIRD_YEAR: "Third Year",
        StudyLevel.FOURTH_YEAR: "Fourth Year",
        StudyLevel.FIFTH_YEAR: "Fifth Year",
    },
    "ar": {
        StudyLevel.FIRST_YEAR: "السنة الأولى",
        StudyLevel.SECOND_YEAR: "السنة الثانية",
        StudyLevel.THIRD_YEAR: "السنة الثالثة",
        StudyLevel.FOURTH_YEAR: "السنة الرابعة",
        StudyLevel.FIFTH_YEAR: "السنة الخامسة",
    },
}

TEXT = {
    "en": {
        "status_active": "Active",
        "status_inactive": "Inactive",
        "roster_headers": (
            "Name", "Department", "Study Level", "Birthplace",
            "Room", "Floor", "Total Paid", "Status",
        ),
        "report_title": "Comprehensive Student Report",
        "generated_on": "Generated on:",
        "summary_section": "Summary Statistics",
        "total_students": "Total students:",
        "active_students": "Active students (current month):",
        "inactive_students": "Inactive students:",
        "behind_on_payments": "Students behind on payments:",
        "financial_section": "Financial Summary",
        "total_overall": "Total collected (overall):",
        "total_monthly": "Total (current month):",
        "total_daily": "Total (today):",
        "monthly_section": "Monthly Breakdown",
        "monthly_headers": ("Month", "Total Amount", "Active Students"),
        "department_section": "Department Breakdown",
        "department_headers": ("Department", "Students", "Total Paid", "Active Students"),
        "receipt_title": "Student Payment Receipt",
        "receipt_subtitle": "Student Management System",
        "receipt_number": "Receipt No.:",
        "receipt_date": "Date:",
        "receipt_time": "Time:",
        "student_name": "Student name:",
        "department": "Department:",
        "study_level": "Study level:",
        "room": "Room:",
        "floor": "Floor:",
        "paid_for_month": "Payment for month:",
        "payment_date": "Payment date:",
        "amount_paid": "Amount paid:",
        "staff_copy": "Staff Copy",
        "student_copy": "Student Copy",
    },
    "ar": {
        "status_active": "نشط",
        "status_inactive": "غير نشط",
        "roster_headers": (
            "الاسم", "الكلية", "المرحلة الدراسية", "مكان الميلاد",
            "الغرفة", "الطابق", "إجمالي المدفوع", "الحالة",
        ),
        "report_title": "تقرير شامل عن الطلاب",
        "generated_on": "تم إنشاؤه في:",
        "summary_section": "إحصائيات موجزة",
        "total_students": "إجمالي الطلاب:",
        "active_students": "الطلاب النشطون (الشهر الحالي):",
        "inactive_students": "الطلاب غير النشطين:",
        "behind_on_payments": "الطلاب المتأخرون في الدفع:",
        "financial_section": "الملخص المالي",
        "total_overall": "إجمالي المبلغ المحصل (عام):",
        "total_monthly": "إجمالي المبلغ (الشهر الحالي):",
        "total_daily": "إجمالي المبلغ (اليوم):",
        "monthly_section": "التفصيل الشهري",
        "monthly_headers": ("الشهر", "إجمالي المبلغ", "الطلاب النشطون"),
        "department_section": "تفصيل الكليات",
        "department_headers": ("الكلية", "عدد الطلاب", "إجمالي المدفوع", "الطلاب النشطون"),
        "receipt_title": "إيصال دفع الطالب",
        "receipt_subtitle": "نظام إدارة الطلاب",
        "receipt_number": "رقم الإيصال:",
        "receipt_date": "التاريخ:",
        "receipt_time": "الوقت:",
        "student_name": "اسم الطالب:",
        "department": "الكلية:",
        "study_level": "المرحلة الدراسية:",
        "room": "الغرفة:",
        "floor": "الطابق:",
        "paid_for_month": "الدفع عن شهر:",
        "payment_date": "تاريخ الدفع:",
        "amount_paid": "المبلغ المدفوع:",
        "staff_copy": "نسخة الموظف",
        "student_copy": "نسخة الطالب",
    },
}


def month_label(month: int, year: int, language: str = "en") -> str:
    """Localized "<month> <year>" label."""
    return f"{MONTH_NAMES[language][month - 1]} {year}"


def department_label(department: Department, language: str = "en") -> str:
    return DEPARTMENT_LABELS[language][department]


def study_level_label(level: StudyLevel, language: str = "en") -> str:
    return STUDY_LEVEL_LABELS[language][level]
