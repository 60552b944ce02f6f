from pathlib import Path
import os
from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent

# Load environment variables
load_dotenv(BASE_DIR / "secret.env")

# checked by KoficClient at construction, not at import
KOFIC_API_KEY = os.getenv("KOFIC_API_KEY")

# KOBIS open API
KOFIC_BASE_URL        = os.getenv(
    "KOFIC_BASE_URL", "http://www.kobis.or.kr/kobisopenapi/webservice/rest/movie"
)
MOVIE_LIST_PATH       = "/searchMovieList.json"
MOVIE_INFO_PATH       = "/searchMovieInfo.json"
KOBIS_DETAIL_PAGE_URL = "http://www.kobis.or.kr/kobis/business/mast/mvie/searchMovieDtl.do?code={code}"

REQUEST_TIMEOUT = float(os.getenv("KOFIC_REQUEST_TIMEOUT", 10))

# List query – "0000".."3000" covers every release year
ITEMS_PER_PAGE = 100
OPEN_START_DT  = "0000"
OPEN_END_DT    = "3000"

ADULT_GENRE = "성인물(에로)"

# File / folder paths
LOG_PATH      = Path(os.getenv("MOVIE_SHIPPER_LOG", BASE_DIR / "shipper_debug.log"))
OUTPUT_FOLDER = Path(os.getenv("MOVIE_SHIPPER_OUT", BASE_DIR / "shipped"))
