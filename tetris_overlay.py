
import pygame
from tetris_config import CONFIG

class Overlay:
    """Menu-time editor for CONFIG. Values apply when the next round starts."""
    def __init__(self, config=None):
        self.config = CONFIG if config is None else config
        self.active=False
        self.items=[
            ("FALL_START_MS","Start fall (ms)",100,1000,25),
            ("FALL_STEP_MS","Speed-up / piece (ms)",0,20,1),
            ("FALL_MIN_MS","Fastest fall (ms)",20,400,10),
            ("MUSIC_VOLUME","Music volume",0.0,1.0,0.1),
            ("MUTE","Mute",False,True,None),
        ]
        self.index=0

    def toggle(self): self.active=not self.active

    def handle(self,e):
        if e.key in (pygame.K_ESCAPE,pygame.K_F1): self.toggle(); return
        if e.key==pygame.K_UP: self.index=(self.index-1)%len(self.items); return
        if e.key==pygame.K_DOWN: self.index=(self.index+1)%len(self.items); return
        key,label,lo,hi,step=self.items[self.index]
        val=self.config[key]
        if isinstance(lo,bool):
            if e.key in (pygame.K_RETURN,pygame.K_LEFT,pygame.K_RIGHT): self.config[key]=not val
            return
        if e.key==pygame.K_LEFT: val=max(lo,val-step)
        elif e.key==pygame.K_RIGHT: val=min(hi,val+step)
        else: return
        self.config[key]=round(val,2) if isinstance(step,float) else val
        self._keep_ordered(key)

    def _keep_ordered(self,key):
        # fall start may never drop below the floor
        if key=="FALL_START_MS" and self.config["FALL_START_MS"]<self.config["FALL_MIN_MS"]:
            self.config["FALL_MIN_MS"]=self.config["FALL_START_MS"]
        if key=="FALL_MIN_MS" and self.config["FALL_MIN_MS"]>self.config["FALL_START_MS"]:
            self.config["FALL_START_MS"]=self.config["FALL_MIN_MS"]

    def draw(self,screen,font,w,h):
        if not self.active: return
        s=pygame.Surface((w-80,h-80),pygame.SRCALPHA); s.fill((20,25,40,230))
        screen.blit(s,(40,40))
        screen.blit(font.render("Settings (F1/Esc to close)",True,(230,240,255)),(60,60))
        y=80
        for i,(key,label,lo,hi,step) in enumerate(self.items):
            col=(255,255,255) if i==self.index else (200,210,235)
            v=self.config[key]
            txt=f"{label}: {v:.2f}" if isinstance(v,float) else f"{label}: {v}"
            screen.blit(font.render(txt,True,col),(60,40+y)); y+=30
