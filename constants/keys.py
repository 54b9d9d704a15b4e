class UIKeys:
    """Keys for UI widgets in ``st.session_state``."""

    SKILL_INPUT = "ui.requirements.skill_input"
    COUPON_INPUT = "ui.checkout.coupon_input"
    INDUSTRY_FILTER = "ui.requirements.industry_filter"


class StateKeys:
    """Keys for data stored in ``st.session_state``."""

    WIZARD_CONTROLLER = "post_job.controller"
    DRAFT_STORE = "post_job.draft_store"
    DRAFTS = "post_job.drafts"
    IDENTITY = "auth.identity"
    SESSION_ID = "session_id"
    LAST_EXIT = "post_job.last_exit"


class DraftKeys:
    """Fixed identifiers used by the durable draft store."""

    JOB_POST = "jobPostDraft"


class FieldPaths:
    """Dotted paths into :class:`models.job_posting.JobPostingForm`."""

    JOB_TITLE = "basics.job_title"
    JOB_TITLE_DESCRIPTION = "basics.job_title_description"
    JOB_TYPE = "basics.job_type"
    CITY = "basics.city"
    AREA = "basics.area"
    PINCODE = "basics.pincode"
    STREET_ADDRESS = "basics.street_address"

    EMPLOYMENT_TYPES = "requirements.employment_types"
    SCHEDULES = "requirements.schedules.selected"
    CUSTOM_SCHEDULE = "requirements.schedules.custom_text"
    HAS_PLANNED_START_DATE = "requirements.has_planned_start_date"
    PLANNED_START_DATE = "requirements.planned_start_date"
    NUMBER_OF_HIRES = "requirements.number_of_hires"
    CUSTOM_NUMBER_OF_HIRES = "requirements.custom_number_of_hires"
    RECRUITMENT_TIMELINE = "requirements.recruitment_timeline"
    MINIMUM_EDUCATION = "requirements.minimum_education.selected"
    CUSTOM_EDUCATION = "requirements.minimum_education.custom_text"
    LANGUAGE_REQUIREMENT = "requirements.language_requirement.selected"
    CUSTOM_LANGUAGE = "requirements.language_requirement.custom_text"
    EXPERIENCE_TYPE = "requirements.experience_type"
    MINIMUM_EXPERIENCE = "requirements.minimum_experience.selected"
    CUSTOM_EXPERIENCE = "requirements.minimum_experience.custom_text"
    SELECTED_INDUSTRIES = "requirements.selected_industries"
    MIN_AGE = "requirements.min_age"
    MAX_AGE = "requirements.max_age"
    GENDER = "requirements.gender.selected"
    CUSTOM_GENDER = "requirements.gender.custom_text"
    SKILLS = "requirements.skills"

    PAY_TYPE = "compensation.pay_type"
    MIN_AMOUNT = "compensation.min_amount"
    MAX_AMOUNT = "compensation.max_amount"
    AMOUNT = "compensation.amount"
    PAY_RATE = "compensation.pay_rate"
    SUPPLEMENTAL_PAY = "compensation.supplemental_pay.selected"
    CUSTOM_SUPPLEMENTAL_PAY = "compensation.supplemental_pay.custom_text"
    BENEFITS = "compensation.benefits.selected"
    CUSTOM_BENEFIT = "compensation.benefits.custom_text"

    JOB_PROFILE_DESCRIPTION = "preferences.job_profile_description"
    NOTIFICATION_EMAILS = "preferences.notification_emails"
    SEND_INDIVIDUAL_EMAILS = "preferences.send_individual_emails"
    REQUIRE_RESUME = "preferences.require_resume"
    ALLOW_CANDIDATE_CONTACT = "preferences.allow_candidate_contact"
    HAS_APPLICATION_DEADLINE = "preferences.has_application_deadline"
    APPLICATION_DEADLINE = "preferences.application_deadline"

    SELECTED_PLAN = "checkout.selected_plan"
    COUPON_CODE = "checkout.coupon_code"
    REQUIRE_GST_INVOICE = "checkout.require_gst_invoice"
    SAVE_CARD_FOR_FUTURE = "checkout.save_card_for_future"
