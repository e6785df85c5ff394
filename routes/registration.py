# routes/registration.py
from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
import logging

from database import MEMBER_INFOS, STORE_ERRORS, USER_INFOS, get_db
from errors import StoreError
from models.user_info import MemberInfo, UserInfo

logger = logging.getLogger(__name__)

router = APIRouter(tags=["registration"])


@router.post("/submit-info", status_code=201, response_class=PlainTextResponse)
async def submit_info(user_info: UserInfo, db=Depends(get_db)):
    try:
        result = await db[USER_INFOS].insert_one(user_info.model_dump(exclude_none=True))
    except STORE_ERRORS as e:
        raise StoreError(f"Error saving user info: {str(e)}", status_code=400)
    logger.info(f"User info saved: {result.inserted_id}")
    return "User info saved"


@router.post("/submit-memberinfo", status_code=201, response_class=PlainTextResponse)
async def submit_member_info(member_info: MemberInfo, db=Depends(get_db)):
    try:
        result = await db[MEMBER_INFOS].insert_one(member_info.model_dump())
    except STORE_ERRORS as e:
        raise StoreError(f"Error saving member info: {str(e)}", status_code=400)
    logger.info(f"Member info saved: {result.inserted_id}")
    return "Member info saved"
