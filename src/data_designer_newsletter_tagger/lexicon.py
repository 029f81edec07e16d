"""Word and phrase lists used by the sentence checks.

Everything here is module-level immutable data: tuples for ordered phrase lists,
frozensets for membership tests.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Newsletter phrase lists (defaults for Options)
# ---------------------------------------------------------------------------

CTA_PHRASES = (
    "read more", "learn more", "sign up", "subscribe", "join now", "get started",
    "try it free", "try now", "download", "view full post", "claim offer", "book a demo",
)
HEDGE_WORDS = ("might", "may", "could", "seems", "appears", "likely", "potentially")
VAGUE_DATES = ("soon", "recently", "nowadays", "these days", "as of late", "in the near future")
BALD_CLAIM_VERBS = ("guarantee", "prove", "ensure", "unlock", "double", "triple")

# ---------------------------------------------------------------------------
# Jargon, spam, fluff
# ---------------------------------------------------------------------------

MILD_JARGON = (
    "optimize", "leverage", "prioritize", "facilitate", "utilize", "methodology", "scalable",
    "innovative", "streamline", "visibility", "alignment", "stakeholders", "mission", "enable",
    "transform", "roadmap", "touchpoints", "deliverables",
)
HEAVY_JARGON = (
    "paradigm shift", "synergize", "omnichannel", "best-in-class", "frictionless",
    "empowerment", "digital transformation", "mission-critical", "seamless integration",
    "strategic deployment", "thought leadership", "core competency", "value proposition",
)

SPAM_WORDS = (
    "act now", "amazing", "boost", "cash", "congratulations", "exclusive offer", "game-changer",
    "guaranteed", "incredible", "instant", "limited-time", "miracle", "revolutionary", "risk-free",
    "secret", "supercharge", "transform", "unlock", "win", "urgent", "don't miss out", "100% free",
    "apply now", "as seen on", "bargain", "best price", "bonus", "buy now", "call now",
    "cancel at any time", "clearance", "click here", "deal", "discount", "double your",
    "earn extra cash", "eliminate debt", "explode", "extra cash", "fantastic", "for free",
    "for instant access", "get it now", "get paid", "giveaway", "great offer", "huge",
    "important information", "increase sales", "investment", "join millions", "lifetime",
    "lowest price", "make money", "money back", "no catch", "no cost", "no fees", "no gimmick",
    "no hidden costs", "no obligation", "now only", "offer expires", "one time", "order now",
    "please read", "prize", "profit", "promise you", "pure profit", "save big",
    "special promotion", "subscribe now", "top status", "trial", "unlimited", "visit our website",
    "winner", "work from home", "free trial", "limited seats", "earn rewards", "get rich",
    "fast cash", "exclusive deal", "free upgrade", "act fast",
)

FLUFF_PHRASES = (
    "be consistent", "go the extra mile", "in this day and age", "it goes without saying",
    "it's important to", "level up your", "post great content", "take regular breaks",
    "think outside the box", "work smarter not harder", "at the end of the day",
    "make it happen", "unlock your potential", "change the game", "your best self",
    "sky's the limit", "sky\u2019s the limit",
)
INTENSIFIERS = (
    "absolutely", "actually", "basically", "certainly", "completely", "definitely",
    "extremely", "honestly", "just", "literally", "obviously", "quite", "really", "simply",
    "totally", "very",
)

# ---------------------------------------------------------------------------
# Redundancy stop words
# ---------------------------------------------------------------------------

STOPWORDS = frozenset({
    "the", "a", "an", "and", "or", "but", "if", "then", "so", "because", "as", "of", "to", "in",
    "on", "for", "with", "by", "at", "from", "that", "this", "these", "those", "is", "are", "was",
    "were", "be", "been", "it", "its", "you", "your", "we", "our", "they", "their", "i", "me", "my",
})

# ---------------------------------------------------------------------------
# Spelling allow-list
# ---------------------------------------------------------------------------

# Inflections (-s, -ed, -ing, -ly, ...) of these words are accepted by the
# spelling check, so base forms are enough for most entries.
_COMMON_WORDS_TEXT = """
the be to of and a in that have i it for not on with he as you do at this but his by from
they we say her she or an will my one all would there their what so up out if about who get
which go me when make can like time no just him know take people into year your good some
could them see other than then now look only come its over think also back after use two how
our work first well way even new want because any these give day most us more news email team
write reads reader readers content article articles value update weekly daily today

api ai data model models system systems platform platforms service services tool tools user
users customer customers business businesses company companies product products feature
features launch launched launches launching release released releases releasing development
developer developers software technology technologies integration integrations solution
solutions workflow workflows automation automate automated automating analytics analysis
analyze analyzed analyzing optimization optimize optimized optimizing performance productivity
efficiency scalable scalability enterprise enterprises research researcher researchers study
studies report reports learning machine generation generate generated generating creation
create created creating experience experiences interaction interactions environment
environments deployment deploy deployed deploying operation operations operational include
includes including provide provides providing support supports supporting enable enables
enabling allow allows allowing describe describes describing increase increases increasing
improve improves improving enhancement enhancements adoption adopter adopters implementation
implement implemented implementing collaboration collaborate collaborating communication
communicate communicating innovation innovative revolutionize revolutionary transformation
transform transforming

starts started starting pricing safety secure security built-in builtin image images imaging
featured featuring quality qualities market markets marketing available access accessible
accessibility process processes processing method methods result results resulting option
options optional version versions updates updated updating change changes changed changing
manage manages managed managing management control controls controlled design designs
designed designing designer designers build builds building scale scales scaled scaling
growth growing expand expands expanded connect connects connected connecting connection
connections network networks

visual visually directly details detailed trained training static ability abilities pursue
pursuing agents digital specific within resolution resolutions employees employee knowledge
workers worker microservices first-call ongoing independently goals shift shifts shifting
earned medal mathematical olympiad reinforcement guided rewards profit scores long-term gains
meant custom customize customized tasks

about above absolute absolutely accept acceptable accepted accident according account
accounts accurate achieve achieved across action actions active actively activity actual
actually adapt added adding addition additional address adjust admit adult advance advanced
advantage advice affect afford afraid after afternoon again against agency agenda agent agree
agreed agreement ahead aimed album alert alike alive allowed almost alone along already
although always amazing among amount analyst ancient angle angry animal annual another answer
answers anybody anyone anything anyway anywhere apart apparent appeal appear appears apple
applied apply approach approval approve april areas argue argument arise around arrive
arrived artist artists aside asked asking aspect assess asset assets assist assume attack
attempt attend attention attitude audience august author authors automatic autumn average
avoid award awards aware awareness away awful

badly balance banking banks barely based basic basically basis battle beach beautiful beauty
became become becomes becoming before began begin beginning behavior behaviour behind being
belief believe believed belong below benefit benefits beside besides better between beyond
bigger biggest billion birth black blank blend block blocks blood board boards bonus books
border borrow bottom bought bound boxes brain brand brands bread break breaking breakfast
brief briefly bright bring brings broad broke broken brother brought brown browse browser
budget budgets build building bunch burden bureau button buttons buyer buyers buying

cabinet calendar called calling calls camera campaign campaigns campus cancel candidate
capable capacity capital capture career careers careful carefully carry cases catch category
cause caused causes ceiling celebrate center centre central century certain certainly chain
chair chairman challenge challenges champion chance changes channel channels chapter
character charge charges chart charts cheap check checked checking checklist chief child
children choice choices choose chosen church circle cities citizen citizens civil claim claims
class classes classic clean clear clearly click clicks client clients climate clinic close
closed closely closer cloud clubs coach coast coffee collect collected collection college
color colour column combine combined comes comfort coming command comment comments commerce
commercial commit commitment committee common commonly community compare compared comparison
compete competition competitive complete completed completely complex compliance component
components computer computers concept concern concerned concerns conclude conclusion
condition conditions conduct conference confidence confident confirm confirmed conflict
congress consider considered consistent constant constantly consumer consumers contact
contain contains context continue continued continues contract contracts contrast
contribute contributor contributors convert cookie cookies copies corner corporate correct
correctly costs council counsel count counter countries country county couple course courses
court cover coverage covered covers crack crash crazy create credit crime crisis criteria
critical crowd crucial culture current currently cycle

daily damage dance danger dangerous dashboard dated dates dealing deals dealt death debate
decade decades december decide decided decision decisions declare decline deeply default
defense define defined definitely degree delay deliver delivered delivery demand demands
department depend depends deposit depth describe description desert deserve desktop despite
destroy detail detect determine develop developed developing device devices dialog dialogue
differ difference differences different difficult dinner direct direction director directors
discover discuss discussed discussion disease display distance distinct district divide
divided doctor document documents dollar dollars domain domestic double doubt download
downloads dozen draft drama drawing dream dreams dress drink drive driven driver drivers
driving dropped during duties

eager earlier early earning earnings earth easier easily eastern economic economy edge
edition editor editors education effect effective effectively effects effort efforts eight
either elect election electric element elements eleven else elsewhere email emails emerge
emerging emotional emphasis employ employer empty enable encourage energy engage engagement
engine engineer engineering engineers enjoy enough ensure enter entire entirely entry equal
equally equipment error errors escape especially essay essential establish estate estimate
europe evaluate evening event events eventually every everybody everyone everything
everywhere evidence exact exactly examine example examples excellent except exchange excited
exciting exclusive executive exercise exist existing expect expected expense expensive
experience expert experts explain explained explore export express extend extent external
extra extremely

facebook facility facing factor factors factory faculty failed failure fairly faith false
familiar family famous fashion father fault favor favorite favour favourite fears february
federal feedback feeling feelings fellow female fewer field fields fifteen fifth fifty fight
figure figures filed files filter final finally finance financial finding findings finger
finish finished fired firms first fiscal fixed flight floor focus focused follow followed
following follows force forces foreign forest forget forgot formal format former forms
formula forth fortune forum forward found founder founders fourth frame framework free
freedom frequent frequently fresh friday friend friendly friends front fully function
functions funding funds further future

gained gallery game games garden gather gender general generally gentle giant given gives
giving glass global going golden goods google govern government grade grand grant graphic
grass great greater greatest green grounds group groups grown guess guest guests guide
guidance guides

habit handle handled hands happen happened happens happy hardly harmful having headline
headlines health healthy heard hearing heart heavy hello helped helpful helping helps hence
herself hidden higher highest highlight highlights highly himself historic history holds
holiday homes honest hoping horse hospital hosted hosting hotel hours house household houses
however human humans hundred hundreds husband

ideal ideas identify identity ignore illegal image imagine impact impacts important
importance improve improved improvement inbox income incoming indeed index indicate
individual industry influence inform information initial initially initiative innovation
input inside insight insights install installed instance instead institute insurance
intelligence intended interest interested interesting interests interface internal
international internet interview interviews introduce introduced invest investment
investors invite invited involve involved issue issues items itself

january joined joining joint journal journey judge judgment july jumped june junior justice

keeping kernel keyboard kinds kitchen knowing known knows

label labels labor labour language languages large largely larger largest later latest
latter laugh launch leader leaders leadership leading learn learned learning least leave
leaving lecture legal length lesson lessons letter letters level levels library license
lights likely limit limited limits lines linked links listen listed lists little lived lives
living local located location lonely longer looked looking looks loose losing losses lovely
lower lucky lunch

machine machines magazine mainly maintain major majority maker makers makes making manager
managers manner march market married master match material materials matter matters maximum
maybe mayor meaning means measure measures media medical medium meeting meetings member
members memory mental mention mentioned message messages metal method metric metrics middle
might million millions minds minimum minister minor minute minutes mission mistake mistakes
mixed mobile modern moment moments monday money month monthly months moral morning mostly
mother motion mount mouse mouth moved movement movie moving music myself

named names narrow nation national native natural naturally nature nearby nearly necessary
needed needs negative neither nervous never newer newest newly newsletter newsletters night
nobody noise normal normally north northern notes nothing notice novel november number
numbers nurse

object objects obvious obviously occur ocean october offer offered offering offers office
officer officers official often older online opening openly opens opera operate operating
opinion opponent opportunity oppose option order ordered orders ordinary organic organization
organizations origin original other others otherwise ought ourselves outcome outcomes output
outside overall owner owners

package packages paid painting panel paper papers parent parents parking partly partner
partners parts party passed passing passion password patient patients pattern patterns pause
paying payment payments peace penalty pending people percent perfect perform performance
perhaps period permit person personal personally phase phone photo photos phrase physical
piano picked picture pictures piece pieces pilot place placed places plain plans plant plants
plate platform played player players playing please pleased plenty pocket point points
police policies policy political politics popular portion position positive possible possibly
posted posts potential potentially pound power powerful powers practical practice prefer
premium prepare prepared presence present presented president press pressure pretty prevent
previous previously price prices primary prime principal principle print prior priority
private probably problem problems procedure proceed process produce produced producer
producers product production professional professor profile program programs progress
project projects promise promote prompt prompts proof proper properly property proposal
propose protect protection proud prove provide provided provider providers public publish
published pulled purchase purpose pushed putting

quarter question questions quick quickly quiet quite quote

radio raise raised range rapid rapidly rarely rather ratio reach reached react reaction
reader readers readily ready reality realize really reason reasons recall receive received
recent recently record records recover reduce reduced reflect reform refresh regard regarding
region regional register regular regularly related relation relations relationship relative
relatively release relevant reliable relief remain remains remember remind remote remove
removed repeat replace replaced reply reported reporter represent republic request requests
require required requires rescue reserve resource resources respect respond response
responses responsible restaurant retail return returns reveal revealed revenue review reviews
reward rights rising river roles round route routine royal ruled rules running rural

sadly safely salary sales sample saturday saved saving savings saying scene schedule scheme
school schools science scientist scientists score scoring screen script search season second
seconds secret section sections sector seeing seeking seemed seems select selected self
selling senate senator sending senior sense sensitive sentence separate september series
serious serve served server serves session setting settings settle seven several severe
shape share shared shares sharing sheet shoot shopping short shortly should shoulder showed
showing shown shows sides signal signed significant significantly signs silence silver
similar simple simply since single sister sites sitting situation skill skills sleep slide
slightly slowly small smaller smart smile social society solid solve somebody someone
something sometimes somewhat somewhere sorry sound sounds source sources south southern space
speak speaker speakers speaking special specialist species specific speech speed spend
spending spent split sponsor sponsored sport sports spread spring square staff stage stake
stand standard standards standing stands start state statement states station status stayed
steady steel steps stick still stock stone stood store stories story straight strange
strategic strategies strategy street strength stress strike strong strongly structure
student students studio style subject submit success successful suddenly suffer suggest
suggested suggests summer summary sunday supply suppose surely surface surprise survey
surveys survive switch symbol system

table tables taken takes taking talent talked talking target targets taught teacher teachers
teaching teams technical technique techniques teens telling tells template temporary tends
terms terrible tested testing texts thank thanks theory therapy thereby therefore these
thing things think thinking third thirty those though thought thoughts thousand thousands
threat three through throughout thursday thus ticket tickets tight times title titles today
together tomorrow tonight topic topics total totally touch tough toward towards track traffic
train transfer travel treat treatment trend trends trial tried tries trouble truly trust
truth trying tuesday turned twelve twenty twice types typical typically

ultimately unable under understand understanding union unique united units universal
university unless unlike unlikely until unusual update upgrade upgrades upload upper urban
usage useful usually

valid value values variety various vehicle vendor vendors versus video videos viewer viewers
views village virtual visible vision visit visitors vital voice volume voters

waiting walked walking wanted wants warning watch watched watching water wealth weather
website websites wednesday weekend weekly weeks weight welcome western whatever wheel whether
which while white whole whose wider widely window windows winner winter wishes within without
woman women wonder wonderful wooden words worked working works world worldwide worried worry
worse worst worth would wrist write writer writers writing written wrong wrote

yearly years yellow yesterday yield young younger yourself youth

zones
"""

COMMON_WORDS = frozenset(_COMMON_WORDS_TEXT.split())
