#!/usr/bin/env python3
"""Static reference data for the workplace health promotion self-assessment."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple


@dataclass(frozen=True)
class Question:
    id: int
    part_id: int
    text: str
    points: int
    note: Optional[str] = None


@dataclass(frozen=True)
class Category:
    id: int
    title: str
    points: int
    description: Optional[str] = None
    examples: Tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class EvaluationBand:
    low: int
    high: int
    title: str
    content: str

    def contains(self, score: float) -> bool:
        return self.low <= score <= self.high


@dataclass(frozen=True)
class Suggestion:
    title: str
    icon: str
    content: str


INTRO_TEXT = """本自我評估表依據職場健康促進推動架構設計，協助事業單位檢視目前推動健康促進工作的情形。

評估內容分為五大構面：職場健康政策與計畫、職場健康需求評估、健康促進設施與活動、生理健康工作環境以及社區參與，共 28 題，總分 100 分。

填寫方式：
1. 請先於「基本資料」頁填寫單位資訊，單位名稱為必填。
2. 於「問卷」頁逐題勾選「是」或「否」，所有題目皆須作答。
3. 送出後系統將自動計算各構面得分率與總分，並提供評估結果與改善建議。

本評估結果僅供單位內部自我檢視使用，填寫資料不會上傳或保存。"""

CATEGORY_ORDINALS: Dict[int, str] = {1: "一", 2: "二", 3: "三", 4: "四", 5: "五"}

CATEGORIES: Tuple[Category, ...] = (
    Category(id=1, title="一、職場健康政策與計畫", points=30),
    Category(id=2, title="二、職場健康需求評估", points=14),
    Category(id=3, title="三、健康促進設施與活動", points=38),
    Category(id=4, title="四、生理健康工作環境", points=12),
    Category(
        id=5,
        title="五、社區參與",
        points=6,
        description=(
            "企業應創造正向友善的工作環境，不只照顧員工，也應擴及其家庭成員及社區。"
            "若能推動健康促進至眷屬、承攬商（如清潔員、保全），能減少因照顧生病家人而請假的問題，提升認同感。"
            "請檢視您的單位活動是否已推廣（或考量）到這些群體？"
        ),
        examples=(
            "推廣多喝水、少喝含糖飲料",
            "號召眷屬/承攬商參加社區健康活動(四癌篩檢/疫苗)",
            "提供交通車供民眾搭乘，避免事故",
            "與社區規劃菸害防制策略",
            "提供托兒補貼或空間，降低家庭壓力",
            "認養公園綠地供健走伸展，增進社區團結",
        ),
    ),
)

QUESTIONS: Tuple[Question, ...] = (
    # 一、職場健康政策與計畫 (30)
    Question(1, 1, "貴單位是否訂有書面的職場健康促進政策，並由高階主管簽署公告？", 4),
    Question(2, 1, "是否成立健康促進推動小組（或委員會），並有高階主管參與？", 4),
    Question(3, 1, "是否編列年度健康促進專屬經費？", 4),
    Question(
        4,
        1,
        "是否訂定年度健康促進計畫，明列目標、活動內容與時程？",
        4,
        "計畫需包含具體可衡量之目標，例如活動參與率、健康體位改善人數等。",
    ),
    Question(5, 1, "是否指派專人（如職護、人資或健康促進專責人員）負責推動？", 4),
    Question(6, 1, "是否訂有員工參與健康活動之獎勵或公假制度？", 4),
    Question(7, 1, "是否定期（至少每年一次）檢討健康促進計畫執行成效並據以修正？", 3),
    Question(8, 1, "是否透過多元管道（公告、電子郵件、內部網站等）向員工宣導健康政策？", 3),
    # 二、職場健康需求評估 (14)
    Question(
        9,
        2,
        "是否定期辦理員工健康檢查，並分析整體健康檢查結果？",
        4,
        "依職業安全衛生法規定辦理之一般健康檢查亦可認定。",
    ),
    Question(10, 2, "是否以問卷、訪談或座談等方式調查員工健康需求與意見？", 4),
    Question(11, 2, "是否依健康檢查或需求調查結果，排定健康議題之優先順序？", 3),
    Question(12, 2, "是否針對高風險員工（如三高、代謝症候群）建立追蹤管理機制？", 3),
    # 三、健康促進設施與活動 (38)
    Question(13, 3, "是否提供運動設施或空間（如健身房、運動場地），或補助員工運動？", 4),
    Question(14, 3, "是否辦理規律性運動課程或活動（如健走、伸展操、運動社團）？", 4),
    Question(15, 3, "是否提供健康飲食環境（如員工餐廳標示熱量、提供蔬果選擇）？", 4),
    Question(16, 3, "是否辦理體重管理或健康體位相關活動？", 4),
    Question(
        17,
        3,
        "是否全面禁菸並提供戒菸服務或轉介資源？",
        4,
        "依菸害防制法規定，室內工作場所應全面禁菸。\n僅設置吸菸區者不予計分。",
    ),
    Question(18, 3, "是否辦理心理健康促進活動或提供員工協助方案（EAP）？", 4),
    Question(19, 3, "是否辦理癌症篩檢或協助員工參與政府提供之篩檢服務？", 4),
    Question(20, 3, "是否提供哺集乳室及友善育兒措施？", 4),
    Question(21, 3, "是否辦理健康講座或健康識能教育課程？", 3),
    Question(22, 3, "是否宣導並落實職場性別平等與執行職務遭受不法侵害之預防？", 3),
    # 四、生理健康工作環境 (12)
    Question(23, 4, "工作場所是否維持良好通風、照明與溫濕度？", 3),
    Question(
        24,
        4,
        "是否定期辦理作業環境監測並改善危害因子？",
        3,
        "依法無須辦理作業環境監測之單位，可以自主檢點紀錄替代。",
    ),
    Question(25, 4, "是否提供符合人因工程之工作設備（如可調式桌椅、護腕墊）？", 3),
    Question(26, 4, "是否維持工作場所清潔衛生，並提供充足且安全的飲水設備？", 3),
    # 五、社區參與 (6)
    Question(27, 5, "是否將健康促進活動推廣至員工眷屬或承攬商（如清潔、保全人員）？", 3),
    Question(28, 5, "是否與社區、衛生所或醫療院所合作辦理健康促進活動？", 3),
)

EVALUATION_BANDS: Tuple[EvaluationBand, ...] = (
    EvaluationBand(
        low=0,
        high=39,
        title="起步階段：健康促進工作尚待建立",
        content=(
            "貴單位目前的健康促進推動仍在起步階段，多數基礎制度尚未建立。\n"
            "建議先由高階主管宣示支持，訂定書面健康政策並指派專人負責，"
            "再從員工健康檢查結果著手，挑選一至兩項最迫切的健康議題開始推動。"
        ),
    ),
    EvaluationBand(
        low=40,
        high=59,
        title="發展階段：已有基礎，仍需系統化推動",
        content=(
            "貴單位已具備部分健康促進措施，但推動方式較為零散。\n"
            "建議成立推動小組並編列經費，依需求評估結果擬定年度計畫，"
            "讓各項活動有明確目標並可定期檢討成效。"
        ),
    ),
    EvaluationBand(
        low=60,
        high=79,
        title="穩健階段：健康促進已具規模",
        content=(
            "貴單位已建立相當完整的健康促進制度，各構面均有具體作為。\n"
            "建議持續強化得分率較低的構面，並將活動延伸至員工眷屬與社區，"
            "同時考慮申請健康職場認證，展現推動成果。"
        ),
    ),
    EvaluationBand(
        low=80,
        high=100,
        title="卓越階段：健康職場的典範",
        content=(
            "貴單位的健康促進推動成效卓著，已將員工健康納入組織經營的核心。\n"
            "建議持續追蹤成效指標、分享推動經驗，"
            "並與供應鏈及社區夥伴合作，擴大健康促進的影響力。"
        ),
    ),
)

SUGGESTIONS: Tuple[Suggestion, ...] = (
    Suggestion(
        title="職場健康政策",
        icon="💼",
        content=(
            "• 由高階主管簽署健康政策並公告周知\n"
            "• 成立跨部門推動小組，定期召開會議\n"
            "• 將健康促進納入年度經營目標與預算"
        ),
    ),
    Suggestion(
        title="健康需求評估",
        icon="🔍",
        content=(
            "• 彙整健康檢查異常項目，找出主要健康問題\n"
            "• 透過問卷了解員工想參加的活動與時段\n"
            "• 依需求排定優先順序，集中資源推動"
        ),
    ),
    Suggestion(
        title="規律運動",
        icon="🏃",
        content=(
            "• 推動工間伸展操或午間健走\n"
            "• 成立運動社團並提供場地或經費補助\n"
            "• 舉辦團體競賽，提高參與動機"
        ),
    ),
    Suggestion(
        title="健康飲食",
        icon="🍱",
        content=(
            "• 員工餐廳提供熱量標示與低油低鹽選項\n"
            "• 會議點心以水果取代精緻甜點\n"
            "• 設置飲水機，鼓勵以白開水取代含糖飲料"
        ),
    ),
    Suggestion(
        title="體重管理",
        icon="⚖️",
        content=(
            "• 辦理減重班或健康體位競賽\n"
            "• 提供體重、體脂、血壓自我量測設備\n"
            "• 結合營養諮詢與運動指導"
        ),
    ),
    Suggestion(
        title="菸害防制",
        icon="🚭",
        content=(
            "• 落實室內工作場所全面禁菸\n"
            "• 提供戒菸門診或戒菸專線轉介資訊\n"
            "• 對成功戒菸的員工給予獎勵"
        ),
    ),
    Suggestion(
        title="職業安全與健康",
        icon="🛡️",
        content=(
            "• 定期辦理危害辨識與風險評估\n"
            "• 推動人因性危害預防計畫\n"
            "• 建立異常工作負荷促發疾病預防機制"
        ),
    ),
    Suggestion(
        title="心理健康",
        icon="😊",
        content=(
            "• 提供員工協助方案（EAP）與諮商資源\n"
            "• 辦理紓壓課程與主管關懷技巧訓練\n"
            "• 營造友善溝通與相互支持的工作氣氛"
        ),
    ),
    Suggestion(
        title="工作環境品質",
        icon="🌬️",
        content=(
            "• 定期檢查通風與空調設備，維持良好空氣品質\n"
            "• 改善照明與噪音，降低眼睛與聽力負擔\n"
            "• 設置綠化空間，提供休憩環境"
        ),
    ),
    Suggestion(
        title="眷屬與社區",
        icon="👥",
        content=(
            "• 開放員工眷屬參加健康講座與篩檢活動\n"
            "• 邀請承攬商人員一同參與健康活動\n"
            "• 與在地衛生所合作辦理社區健康活動"
        ),
    ),
)

UNIT_TYPES: List[str] = ["民間企業", "公營企業", "政府機關", "學校機關", "醫療院所", "其他"]
SCHOOL_UNIT_TYPE = "學校機關"
HOSPITAL_UNIT_TYPE = "醫療院所"
OTHER_UNIT_TYPE = "其他"
OWNERSHIP_TYPES: List[str] = ["公立", "私立"]

INDUSTRIES: List[str] = [
    "農、林、漁、牧業",
    "礦業及土石採取業",
    "製造業",
    "電力及燃氣供應業",
    "用水供應及污染整治業",
    "營建工程業",
    "批發及零售業",
    "運輸及倉儲業",
    "住宿及餐飲業",
    "出版影音及資通訊業",
    "金融及保險業",
    "不動產業",
    "專業、科學及技術服務業",
    "支援服務業",
    "公共行政及國防；強制性社會安全",
    "教育業",
    "醫療保健及社會工作服務業",
    "藝術、娛樂及休閒服務業",
    "其他服務業",
]

TAIWAN_CITIES: Dict[str, List[str]] = {
    "臺北市": [
        "中正區", "大同區", "中山區", "松山區", "大安區", "萬華區",
        "信義區", "士林區", "北投區", "內湖區", "南港區", "文山區",
    ],
    "新北市": [
        "板橋區", "三重區", "中和區", "永和區", "新莊區", "新店區",
        "樹林區", "鶯歌區", "三峽區", "淡水區", "汐止區", "瑞芳區",
        "土城區", "蘆洲區", "五股區", "泰山區", "林口區", "深坑區",
        "石碇區", "坪林區", "三芝區", "石門區", "八里區", "平溪區",
        "雙溪區", "貢寮區", "金山區", "萬里區", "烏來區",
    ],
    "桃園市": [
        "桃園區", "中壢區", "大溪區", "楊梅區", "蘆竹區", "大園區",
        "龜山區", "八德區", "龍潭區", "平鎮區", "新屋區", "觀音區",
        "復興區",
    ],
    "臺中市": [
        "中區", "東區", "南區", "西區", "北區", "北屯區", "西屯區",
        "南屯區", "太平區", "大里區", "霧峰區", "烏日區", "豐原區",
        "后里區", "石岡區", "東勢區", "和平區", "新社區", "潭子區",
        "大雅區", "神岡區", "大肚區", "沙鹿區", "龍井區", "梧棲區",
        "清水區", "大甲區", "外埔區", "大安區",
    ],
    "臺南市": [
        "中西區", "東區", "南區", "北區", "安平區", "安南區", "永康區",
        "歸仁區", "新化區", "左鎮區", "玉井區", "楠西區", "南化區",
        "仁德區", "關廟區", "龍崎區", "官田區", "麻豆區", "佳里區",
        "西港區", "七股區", "將軍區", "學甲區", "北門區", "新營區",
        "後壁區", "白河區", "東山區", "六甲區", "下營區", "柳營區",
        "鹽水區", "善化區", "大內區", "山上區", "新市區", "安定區",
    ],
    "高雄市": [
        "新興區", "前金區", "苓雅區", "鹽埕區", "鼓山區", "旗津區",
        "前鎮區", "三民區", "楠梓區", "小港區", "左營區", "仁武區",
        "大社區", "岡山區", "路竹區", "阿蓮區", "田寮區", "燕巢區",
        "橋頭區", "梓官區", "彌陀區", "永安區", "湖內區", "鳳山區",
        "大寮區", "林園區", "鳥松區", "大樹區", "旗山區", "美濃區",
        "六龜區", "內門區", "杉林區", "甲仙區", "桃源區", "那瑪夏區",
        "茂林區", "茄萣區",
    ],
    "基隆市": ["仁愛區", "信義區", "中正區", "中山區", "安樂區", "暖暖區", "七堵區"],
    "新竹市": ["東區", "北區", "香山區"],
    "嘉義市": ["東區", "西區"],
    "新竹縣": [
        "竹北市", "湖口鄉", "新豐鄉", "新埔鎮", "關西鎮", "芎林鄉",
        "寶山鄉", "竹東鎮", "五峰鄉", "橫山鄉", "尖石鄉", "北埔鄉",
        "峨眉鄉",
    ],
    "苗栗縣": [
        "竹南鎮", "頭份市", "三灣鄉", "南庄鄉", "獅潭鄉", "後龍鎮",
        "通霄鎮", "苑裡鎮", "苗栗市", "造橋鄉", "頭屋鄉", "公館鄉",
        "大湖鄉", "泰安鄉", "銅鑼鄉", "三義鄉", "西湖鄉", "卓蘭鎮",
    ],
    "彰化縣": [
        "彰化市", "芬園鄉", "花壇鄉", "秀水鄉", "鹿港鎮", "福興鄉",
        "線西鄉", "和美鎮", "伸港鄉", "員林市", "社頭鄉", "永靖鄉",
        "埔心鄉", "溪湖鎮", "大村鄉", "埔鹽鄉", "田中鎮", "北斗鎮",
        "田尾鄉", "埤頭鄉", "溪州鄉", "竹塘鄉", "二林鎮", "大城鄉",
        "芳苑鄉", "二水鄉",
    ],
    "南投縣": [
        "南投市", "中寮鄉", "草屯鎮", "國姓鄉", "埔里鎮", "仁愛鄉",
        "名間鄉", "集集鎮", "水里鄉", "魚池鄉", "信義鄉", "竹山鎮",
        "鹿谷鄉",
    ],
    "雲林縣": [
        "斗南鎮", "大埤鄉", "虎尾鎮", "土庫鎮", "褒忠鄉", "東勢鄉",
        "臺西鄉", "崙背鄉", "麥寮鄉", "斗六市", "林內鄉", "古坑鄉",
        "莿桐鄉", "西螺鎮", "二崙鄉", "北港鎮", "水林鄉", "口湖鄉",
        "四湖鄉", "元長鄉",
    ],
    "嘉義縣": [
        "番路鄉", "梅山鄉", "竹崎鄉", "阿里山鄉", "中埔鄉", "大埔鄉",
        "水上鄉", "鹿草鄉", "太保市", "朴子市", "東石鄉", "六腳鄉",
        "新港鄉", "民雄鄉", "大林鎮", "溪口鄉", "義竹鄉", "布袋鎮",
    ],
    "屏東縣": [
        "屏東市", "三地門鄉", "霧臺鄉", "瑪家鄉", "九如鄉", "里港鄉",
        "高樹鄉", "鹽埔鄉", "長治鄉", "麟洛鄉", "竹田鄉", "內埔鄉",
        "萬丹鄉", "潮州鎮", "泰武鄉", "來義鄉", "萬巒鄉", "崁頂鄉",
        "新埤鄉", "南州鄉", "林邊鄉", "東港鎮", "琉球鄉", "佳冬鄉",
        "新園鄉", "枋寮鄉", "枋山鄉", "春日鄉", "獅子鄉", "車城鄉",
        "牡丹鄉", "恆春鎮", "滿州鄉",
    ],
    "宜蘭縣": [
        "宜蘭市", "頭城鎮", "礁溪鄉", "壯圍鄉", "員山鄉", "羅東鎮",
        "三星鄉", "大同鄉", "五結鄉", "冬山鄉", "蘇澳鎮", "南澳鄉",
    ],
    "花蓮縣": [
        "花蓮市", "新城鄉", "秀林鄉", "吉安鄉", "壽豐鄉", "鳳林鎮",
        "光復鄉", "豐濱鄉", "瑞穗鄉", "萬榮鄉", "玉里鎮", "卓溪鄉",
        "富里鄉",
    ],
    "臺東縣": [
        "臺東市", "綠島鄉", "蘭嶼鄉", "延平鄉", "卑南鄉", "鹿野鄉",
        "關山鎮", "海端鄉", "池上鄉", "東河鄉", "成功鎮", "長濱鄉",
        "太麻里鄉", "金峰鄉", "大武鄉", "達仁鄉",
    ],
    "澎湖縣": ["馬公市", "西嶼鄉", "望安鄉", "七美鄉", "白沙鄉", "湖西鄉"],
    "金門縣": ["金沙鎮", "金湖鎮", "金寧鄉", "金城鎮", "烈嶼鄉", "烏坵鄉"],
    "連江縣": ["南竿鄉", "北竿鄉", "莒光鄉", "東引鄉"],
}


def questions_for_part(part_id: int, questions: Tuple[Question, ...] = QUESTIONS) -> List[Question]:
    return [q for q in questions if q.part_id == part_id]


def category_ordinal(part_id: int) -> str:
    return CATEGORY_ORDINALS.get(part_id, str(part_id))
