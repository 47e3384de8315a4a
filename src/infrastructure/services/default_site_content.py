"""
Настройки контента сайта по умолчанию.
Используются, когда в хранилище нет сохраненного значения или оно повреждено.
"""

# Ключи текстов страниц
CONTACTS_CONFIG_KEY = "contacts_config"
ABOUT_CONFIG_KEY = "about_config"
DOCS_CONFIG_KEY = "docs_config"
LOGO_CONFIG_KEY = "logo_config"
HOME_ADMIN_KEY = "home_admin"

DEFAULT_CONTACTS_CONFIG = {
    "heroSubtitle": "Свяжитесь с нами любым удобным способом",
    "phoneNumber": "+7 (495) 123-45-67",
    "telegramLink": "https://t.me/your_telegram",
    "whatsappLink": "",
    "email": "info@heavyprofile.ru",
    "scheduleMain": "Прием заявок круглосуточно",
    "scheduleNote": "Работаем 24/7",
    "inn": "123456789012",
    "ogrn": "1234567890123",
    "companyName": "ООО \"Тяжёлый Профиль\"",
    "mapTitle": "Как нас найти",
    "mapIframeSrc": "https://yandex.ru/map-widget/v1/?um=constructor%3A1a2b3c4d5e6f7g8h9i0j&source=constructor",
    "mapAddress": "",
    "showHero": True,
    "showInfo": True,
    "showForm": True,
    "showMap": True,
    "showAddress": True,
    "addressLine": "",
}

DEFAULT_ABOUT_CONFIG = {
    "showMission": True,
    "showStats": True,
    "showAdvantages": True,
    "showQuote": True,
    "showCta": True,
    "showForm": True,
    "galleryImages": [
        "https://images.unsplash.com/photo-1581092160565-5d3f3c2e4b3a?w=1200&q=80",
        "https://images.unsplash.com/photo-1504307651254-35680f356dfd?w=1200&q=80",
        "https://images.unsplash.com/photo-1581091226825-a6a2a5aee158?w=1200&q=80",
        "https://images.unsplash.com/photo-1581094794329-c8112a89af12?w=1200&q=80",
    ],
}

DEFAULT_CONSENT_CONFIG = {
    "consentEnabled": True,
    "consentLabelPrefix": "Я соглашаюсь на обработку персональных данных и принимаю",
    "consentLinkText": "политику конфиденциальности",
    "consentLinkHref": "/privacy",
}

DEFAULT_DOCUMENTS_CONFIG = {
    "privacy": [
        {
            "title": "Общие положения",
            "content": [
                "Настоящая Политика конфиденциальности определяет порядок обработки и защиты персональных данных пользователей сайта.",
                "Используя данный сайт, вы подтверждаете своё согласие с условиями настоящей Политики конфиденциальности.",
            ],
        },
        {
            "title": "Сбор и использование информации",
            "content": [
                "Мы собираем только те данные, которые необходимы для обработки заявок и обратной связи: имя, номер телефона, адрес электронной почты и содержимое сообщения.",
                "Персональные данные используются исключительно для связи с вами и предоставления наших услуг.",
            ],
        },
    ],
    "offer": [
        {
            "title": "Общие положения",
            "content": [
                "Настоящий документ является публичной офертой и определяет порядок и условия оказания услуг по предоставлению рабочего персонала.",
                "Начало использования услуг означает полное и безоговорочное согласие Заказчика с условиями настоящей оферты.",
            ],
        },
        {
            "title": "Предмет договора",
            "content": [
                "Исполнитель предоставляет Заказчику услуги по подбору и предоставлению рабочего персонала для выполнения работ на объектах Заказчика.",
            ],
        },
    ],
    "showContactCta": True,
    **DEFAULT_CONSENT_CONFIG,
}

DEFAULT_LOGO_CONFIG = {
    "enabled": True,
    "logoUrl": "/logo_black.png",
    "logoDarkUrl": "/logo_white.png",
}

_HERO_IMAGE = "https://images.unsplash.com/photo-1504307651254-35680f356dfd?auto=format&fit=crop&w=2070&q=80"

DEFAULT_HOME_ADMIN = {
    "blocks": {
        "hero": True,
        "heroForm": True,
        "services": True,
        "about": True,
        "howItWorks": True,
        "contacts": True,
    },
    "texts": {
        "heroSubtitle": "Профессиональный подбор рабочего персонала для строительных объектов, складов, монтажных и промышленных работ",
        "servicesTitle": "Наши услуги",
        "servicesSubtitle": "Подберем рабочий персонал под вашу задачу: от разнорабочих до узкопрофильных специалистов",
        "aboutTitle": "О компании",
        "aboutText": "Мы предоставляем рабочий персонал, который умеет работать в темпе, соблюдает технику безопасности и выполняет задачи без лишних вопросов.",
        "howTitle": "Как мы работаем",
        "contactsCta": "Оставьте заявку, и мы свяжемся с вами в ближайшее время",
    },
    "images": {
        "heroBg": _HERO_IMAGE,
        "aboutBg": _HERO_IMAGE,
    },
    "services": [
        {
            "id": "warehouse",
            "title": "Складские работы",
            "description": "Персонал для складских операций: грузчики, комплектовщики, фасовщики и другие сотрудники.",
            "link": "/services/warehouse",
        },
        {
            "id": "production",
            "title": "Производство",
            "description": "Рабочий персонал для производственных линий и цехов.",
            "link": "/services/production",
        },
        {
            "id": "construction",
            "title": "Строительные работы",
            "description": "Персонал для строительных объектов: от разнорабочих до узких специалистов.",
            "link": "/services/construction",
        },
        {
            "id": "cleaning",
            "title": "Клининг и уборка",
            "description": "Уборка территорий, нежилых помещений, снега и строительного мусора.",
            "link": "/services/cleaning",
        },
        {
            "id": "earthworks",
            "title": "Земляные работы",
            "description": "Бригады для земляных работ, траншей, котлованов и подготовки территории.",
            "link": "/services/earthworks",
        },
    ],
}
